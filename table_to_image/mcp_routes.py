# table_to_image/mcp_routes.py
"""
MCP-style envelope around the same table conversion as POST /convert.

Requests look like {"method": "convert_table", "params": {"data": ..., "options": {...}}}
and responses like {"result": {...}, "metadata": {...}}.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header
from pydantic import ValidationError

from . import __version__
from .config import Settings, get_settings
from .converter import convert_table, resolve_options
from .errors import TableConversionError
from .normalizer import TableShape
from .routes import SERVICE_NAME, error_response, utc_timestamp
from .schemas import MAX_IMAGE_DIMENSION, MCPRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mcp")

MCP_VERSION = "1.0"
INPUT_FORMATS = [shape.value for shape in TableShape]
OUTPUT_FORMATS = ["png", "jpg", "svg"]
STYLES = ["default", "minimal", "dark", "light"]


def _metadata() -> dict:
    return {"timestamp": utc_timestamp(), "provider": "quickchart", "mcp_version": MCP_VERSION}


def _is_authorized(authorization: Optional[str], settings: Settings) -> bool:
    if not settings.mcp_api_key:
        return True
    if not authorization:
        return False
    return authorization.replace("Bearer ", "", 1) == settings.mcp_api_key


# ------------------------------
# Discovery
# ------------------------------
@router.get("")
@router.get("/")
def mcp_info():
    return {
        "name": SERVICE_NAME,
        "version": __version__,
        "protocol": f"mcp/{MCP_VERSION}",
        "description": "Convert table data to images using QuickChart.io",
        "capabilities": ["convert_table", "format_support", "style_options"],
        "endpoints": {
            "convert": "/mcp/convert",
            "capabilities": "/mcp/capabilities",
            "schema": "/mcp/schema",
        },
        "timestamp": utc_timestamp(),
    }


@router.get("/capabilities")
def mcp_capabilities(settings: Settings = Depends(get_settings)):
    return {
        "capabilities": [
            {
                "name": "convert_table",
                "description": "Convert table data to image",
                "input": {
                    "type": "object",
                    "properties": {
                        "data": {"type": "array", "description": "Table data in various formats"},
                        "options": {"type": "object", "description": "Conversion options"},
                    },
                },
                "output": {
                    "type": "object",
                    "properties": {
                        "imageUrl": {"type": "string", "description": "URL of generated image"},
                        "format": {"type": "string", "description": "Image format (png, jpg, svg)"},
                    },
                },
            },
            {
                "name": "format_support",
                "description": "Get supported table formats",
                "output": {"type": "array", "items": {"type": "string"}},
            },
        ],
        "formats": {"input": INPUT_FORMATS, "output": OUTPUT_FORMATS},
        "styles": STYLES,
        "limits": {
            "maxCells": settings.max_table_size,
            "maxWidth": MAX_IMAGE_DIMENSION,
            "maxHeight": MAX_IMAGE_DIMENSION,
        },
    }


@router.get("/schema")
def mcp_schema():
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": "Table to Image MCP",
        "type": "object",
        "properties": {
            "method": {
                "type": "string",
                "enum": ["convert_table", "format_support"],
                "description": "MCP method to invoke",
            },
            "params": {
                "type": "object",
                "properties": {
                    "data": {
                        "oneOf": [
                            {
                                "type": "object",
                                "properties": {
                                    "headers": {"type": "array", "items": {"type": "string"}},
                                    "rows": {"type": "array", "items": {"type": "array"}},
                                },
                            },
                            {"type": "array", "items": {"type": "object"}},
                            {"type": "array", "items": {"type": "array"}},
                        ]
                    },
                    "options": {
                        "type": "object",
                        "properties": {
                            "format": {"type": "string", "enum": OUTPUT_FORMATS},
                            "width": {"type": "number", "minimum": 1, "maximum": MAX_IMAGE_DIMENSION},
                            "height": {"type": "number", "minimum": 1, "maximum": MAX_IMAGE_DIMENSION},
                            "style": {"type": "string", "enum": STYLES},
                        },
                    },
                },
            },
        },
        "required": ["method"],
    }


# ------------------------------
# Invocation
# ------------------------------
@router.post("/convert")
def mcp_convert(
    req: MCPRequest,
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
):
    if not _is_authorized(authorization, settings):
        logger.warning("Rejected MCP request with missing or invalid bearer token")
        return error_response(401, "Unauthorized", "Invalid or missing bearer token")

    if req.method == "format_support":
        return {"result": INPUT_FORMATS, "metadata": _metadata()}

    if req.method != "convert_table":
        return error_response(400, "Invalid Request", 'Method must be "convert_table"')

    if req.params is None or req.params.data is None:
        return error_response(400, "Invalid Request", "Missing params.data")

    try:
        options = resolve_options(req.params.options, settings)
        result = convert_table(req.params.data, options, settings)
    except (TableConversionError, ValidationError) as e:
        return error_response(400, "MCP Conversion Error", str(e))

    return {
        "result": {"imageUrl": result.image_url, "format": result.format, "success": True},
        "metadata": _metadata(),
    }
