from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional

ImageFormat = Literal["png", "jpg", "svg"]

MAX_IMAGE_DIMENSION = 4096


class CanonicalTable(BaseModel):
    headers: List[Any]
    rows: List[Any]  # rows of cells, aligned to headers by position (not enforced)


class ConversionOptions(BaseModel):
    format: ImageFormat = "png"
    width: int = Field(800, gt=0, le=MAX_IMAGE_DIMENSION)
    height: int = Field(600, gt=0, le=MAX_IMAGE_DIMENSION)
    style: str = "default"


class ConvertRequest(BaseModel):
    table: Any = None
    format: Optional[ImageFormat] = None
    width: Optional[int] = Field(None, gt=0, le=MAX_IMAGE_DIMENSION)
    height: Optional[int] = Field(None, gt=0, le=MAX_IMAGE_DIMENSION)
    style: Optional[str] = None


class ConvertResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    image_url: str = Field(alias="imageUrl")
    format: str
    style: str
    timestamp: str


class MCPParams(BaseModel):
    data: Any = None
    options: Optional[Dict[str, Any]] = None


class MCPRequest(BaseModel):
    method: Optional[str] = None
    params: Optional[MCPParams] = None
