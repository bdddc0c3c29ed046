# table_to_image/config.py
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    quickchart_base_url: str = "https://quickchart.io/chart"
    max_table_size: int = 10000
    default_format: str = "png"
    default_width: int = 800
    default_height: int = 600
    quickchart_api_key: Optional[str] = None
    mcp_api_key: Optional[str] = None
    enable_cors: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from the environment (a .env file is loaded on import).
        Unset variables fall back to the field defaults.
        """
        defaults = cls()
        return cls(
            quickchart_base_url=os.getenv("QUICKCHART_BASE_URL", defaults.quickchart_base_url),
            max_table_size=int(os.getenv("MAX_TABLE_SIZE", defaults.max_table_size)),
            default_format=os.getenv("DEFAULT_IMAGE_FORMAT", defaults.default_format),
            default_width=int(os.getenv("DEFAULT_IMAGE_WIDTH", defaults.default_width)),
            default_height=int(os.getenv("DEFAULT_IMAGE_HEIGHT", defaults.default_height)),
            quickchart_api_key=os.getenv("QUICKCHART_API_KEY") or None,
            mcp_api_key=os.getenv("MCP_API_KEY") or None,
            # only the literal "false" turns CORS off
            enable_cors=os.getenv("ENABLE_CORS") != "false",
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()
