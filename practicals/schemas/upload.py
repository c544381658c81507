from pydantic import BaseModel
from typing import List, Optional


class UploadedFile(BaseModel):
    filename: str
    originalName: Optional[str] = None
    contentType: Optional[str] = None
    size: int
    url: str


class UploadResult(BaseModel):
    count: int
    files: List[UploadedFile]


class StoredFile(BaseModel):
    filename: str
    url: str
    size: Optional[int] = None
