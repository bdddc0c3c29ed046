# table_to_image/converter.py
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .chart_spec import background_for_style, build_image_url, build_render_params, build_spec
from .config import Settings
from .normalizer import detect_shape, normalize, validate_table_size
from .schemas import CanonicalTable, ConversionOptions

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    image_url: str
    format: str
    style: str
    table: CanonicalTable
    chart: Dict[str, Any]
    params: Dict[str, str]


def resolve_options(raw: Optional[Dict[str, Any]], settings: Settings) -> ConversionOptions:
    """
    Fill in missing (or empty) options from the configured defaults.
    Raises pydantic.ValidationError for out-of-range values.
    """
    raw = raw or {}
    return ConversionOptions(
        format=raw.get("format") or settings.default_format,
        width=raw.get("width") or settings.default_width,
        height=raw.get("height") or settings.default_height,
        style=raw.get("style") or "default",
    )


def convert_table(table: Any, options: ConversionOptions, settings: Settings) -> ConversionResult:
    """
    Size guard -> normalize -> chart spec -> renderer URL.

    The size guard runs on the raw input, before normalization.
    Raises TableTooLargeError or UnsupportedFormatError.
    """
    cell_count = validate_table_size(table, settings.max_table_size)
    normalized = normalize(table)
    logger.info(
        "Converting %s table (%d cells) to %s %dx%d, style=%s",
        detect_shape(table).value, cell_count, options.format,
        options.width, options.height, options.style,
    )

    chart = build_spec(normalized, options.width, options.height, options.style)
    params = build_render_params(
        chart,
        options.format,
        options.width,
        options.height,
        api_key=settings.quickchart_api_key,
        background_color=background_for_style(options.style),
    )
    image_url = build_image_url(settings.quickchart_base_url, params)

    return ConversionResult(
        image_url=image_url,
        format=options.format,
        style=options.style,
        table=normalized,
        chart=chart,
        params=params,
    )
