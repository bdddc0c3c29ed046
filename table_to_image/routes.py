# table_to_image/routes.py
from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from . import __version__
from .config import Settings, get_settings
from .converter import convert_table, resolve_options
from .errors import TableConversionError
from .schemas import ConvertRequest, ConvertResponse

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "table-to-image-mcp"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


# ------------------------------
# Health
# ------------------------------
@router.get("/")
@router.get("/health")
def health():
    return {
        "status": "healthy",
        "version": __version__,
        "service": SERVICE_NAME,
        "timestamp": utc_timestamp(),
    }


# ------------------------------
# Table -> image conversion
# ------------------------------
@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)):
    """
    Accepts table data in any supported shape and returns the URL of the
    rendered chart image. Nothing is fetched or stored here.
    """
    if req.table is None:
        return error_response(400, "Validation Error", "Missing table data")

    options = resolve_options(req.model_dump(include={"format", "width", "height", "style"}), settings)
    try:
        result = convert_table(req.table, options, settings)
    except TableConversionError as e:
        return error_response(400, "Validation Error", str(e))

    return ConvertResponse(
        image_url=result.image_url,
        format=result.format,
        style=result.style,
        timestamp=utc_timestamp(),
    )
