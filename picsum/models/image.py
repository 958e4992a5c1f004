from enum import Enum
from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Optional

from picsum.errors import InvalidParameter

class FileType(str, Enum):
    jpg = "jpg"
    webp = "webp"

class ImageRequest(BaseModel):
    # Numeric ids and seeds are accepted and kept as strings.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    width: int
    height: int
    id: Optional[str] = None
    seed: Optional[str] = None
    grayscale: bool = False
    blur: Optional[int] = None
    file_type: Optional[FileType] = None

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidParameter(f"Invalid image request: {e}") from e

class ImageInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    author: str
    width: int
    height: int
    url: str
    download_url: str

class Image(BaseModel):
    id: Optional[str] = None
    data: bytes
