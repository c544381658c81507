import logging
from typing import List

from fastapi import APIRouter, Depends, File, UploadFile, status

from practicals.core.config import settings
from practicals.core.errors import BadRequestError, NotFoundError
from practicals.schemas.upload import StoredFile, UploadedFile, UploadResult
from practicals.services.storage import StorageBackend, get_storage
from practicals.utils.validators import read_upload, unique_filename, validate_storage_filename

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_PREFIX = "files"


def _key(filename: str) -> str:
    if not validate_storage_filename(filename):
        raise BadRequestError("Invalid file name", code="INVALID_FILENAME")
    return f"{UPLOAD_PREFIX}/{filename}"


def _store(storage: StorageBackend, file: UploadFile, content: bytes) -> UploadedFile:
    filename = unique_filename(file.filename)
    url = storage.save(_key(filename), content, file.content_type)
    logger.info(f"Stored upload {file.filename!r} as {filename} ({len(content)} bytes)")
    return UploadedFile(
        filename=filename,
        originalName=file.filename,
        contentType=file.content_type,
        size=len(content),
        url=url,
    )


@router.post("/", response_model=UploadedFile, status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: UploadFile = File(...),
    storage: StorageBackend = Depends(get_storage)
):
    content = await read_upload(file, settings.ALLOWED_UPLOAD_EXTENSIONS, settings.MAX_UPLOAD_SIZE)
    return _store(storage, file, content)


@router.post("/multiple", response_model=UploadResult, status_code=status.HTTP_201_CREATED)
async def upload_files(
    files: List[UploadFile] = File(...),
    storage: StorageBackend = Depends(get_storage)
):
    if len(files) > settings.MAX_UPLOAD_FILES:
        raise BadRequestError(
            f"Too many files. At most {settings.MAX_UPLOAD_FILES} files per request",
            code="TOO_MANY_FILES"
        )

    # Validate everything before storing anything
    contents = [
        await read_upload(file, settings.ALLOWED_UPLOAD_EXTENSIONS, settings.MAX_UPLOAD_SIZE)
        for file in files
    ]
    stored = [_store(storage, file, content) for file, content in zip(files, contents)]
    return UploadResult(count=len(stored), files=stored)


@router.get("/", response_model=List[StoredFile])
def list_files(storage: StorageBackend = Depends(get_storage)):
    files = []
    for key in storage.list(f"{UPLOAD_PREFIX}/"):
        files.append(StoredFile(
            filename=key[len(UPLOAD_PREFIX) + 1:],
            url=storage.url_for(key),
            size=storage.size(key),
        ))
    return files


@router.get("/{filename}", response_model=StoredFile)
def get_file(filename: str, storage: StorageBackend = Depends(get_storage)):
    key = _key(filename)
    if not storage.exists(key):
        raise NotFoundError("File not found")
    return StoredFile(filename=filename, url=storage.url_for(key), size=storage.size(key))


@router.delete("/{filename}", status_code=status.HTTP_204_NO_CONTENT)
def delete_file(filename: str, storage: StorageBackend = Depends(get_storage)):
    key = _key(filename)
    if not storage.exists(key):
        raise NotFoundError("File not found")
    storage.delete(key)
    logger.info(f"Deleted upload {filename}")
    return None
