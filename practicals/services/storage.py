"""
File storage backends.

Uploaded media goes through a StorageBackend so the same routes can write to
the local disk or to a Supabase storage bucket.
"""
import logging
import os
from functools import lru_cache
from typing import List, Optional

from supabase import Client, create_client

from practicals.core.config import settings
from practicals.core.errors import AppError, BadRequestError

logger = logging.getLogger(__name__)

# storage3 returns at most this many entries per list call
LIST_PAGE_SIZE = 100


class StorageError(AppError):
    code = "STORAGE_ERROR"


class StorageBackend:
    name = "base"

    def save(self, key: str, data: bytes, content_type: Optional[str] = None) -> str:
        """Store data under key and return its public URL."""
        raise NotImplementedError

    def read(self, key: str) -> bytes:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def exists(self, key: str) -> bool:
        raise NotImplementedError

    def size(self, key: str) -> Optional[int]:
        raise NotImplementedError

    def list(self, prefix: str = "") -> List[str]:
        raise NotImplementedError

    def url_for(self, key: str) -> str:
        raise NotImplementedError


def normalize_key(key: str) -> str:
    """Turn a key into a relative, forward-slash path that cannot climb out of its root."""
    cleaned = key.replace("\\", "/").strip("/")
    parts = [part for part in cleaned.split("/") if part not in ("", ".")]
    if not parts or ".." in parts:
        raise BadRequestError(f"Invalid storage key: {key!r}", code="INVALID_KEY")
    return "/".join(parts)


class LocalStorage(StorageBackend):
    name = "local"

    def __init__(self, root: str, base_url: str = "/uploads"):
        self.root = os.path.abspath(root)
        self.base_url = base_url.rstrip("/")
        os.makedirs(self.root, exist_ok=True)

    def _path(self, key: str) -> str:
        return os.path.join(self.root, *normalize_key(key).split("/"))

    def save(self, key: str, data: bytes, content_type: Optional[str] = None) -> str:
        path = self._path(key)
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "wb") as buffer:
                buffer.write(data)
        except OSError as e:
            logger.error(f"Error saving {key} to local storage: {e}")
            raise StorageError(f"Failed to store file: {key}")
        return self.url_for(key)

    def read(self, key: str) -> bytes:
        path = self._path(key)
        if not os.path.isfile(path):
            raise StorageError(f"File not found in storage: {key}", code="FILE_NOT_FOUND")
        with open(path, "rb") as f:
            return f.read()

    def delete(self, key: str) -> None:
        path = self._path(key)
        if os.path.isfile(path):
            os.remove(path)

    def exists(self, key: str) -> bool:
        return os.path.isfile(self._path(key))

    def size(self, key: str) -> Optional[int]:
        path = self._path(key)
        return os.path.getsize(path) if os.path.isfile(path) else None

    def list(self, prefix: str = "") -> List[str]:
        keys = []
        for dirpath, _, filenames in os.walk(self.root):
            for filename in filenames:
                rel = os.path.relpath(os.path.join(dirpath, filename), self.root)
                key = rel.replace(os.sep, "/")
                if key.startswith(prefix):
                    keys.append(key)
        return sorted(keys)

    def url_for(self, key: str) -> str:
        return f"{self.base_url}/{normalize_key(key)}"


class SupabaseStorage(StorageBackend):
    name = "supabase"

    def __init__(self, url: str, key: str, bucket: str, client: Optional[Client] = None):
        self.url = url
        self.key = key
        self.bucket = bucket
        # Initialize client lazily
        self._client = client

    def _get_client(self) -> Client:
        if self._client is None:
            if not self.url or not self.key:
                raise StorageError("Supabase storage is not configured (SUPABASE_URL / SUPABASE_KEY)")
            logger.info("Initializing Supabase client...")
            self._client = create_client(self.url, self.key)
            logger.info("Supabase client initialized.")
        return self._client

    def _bucket(self):
        return self._get_client().storage.from_(self.bucket)

    def save(self, key: str, data: bytes, content_type: Optional[str] = None) -> str:
        key = normalize_key(key)
        file_options = {"upsert": "true"}
        if content_type:
            file_options["content-type"] = content_type
        try:
            self._bucket().upload(key, data, file_options)
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"Error uploading {key} to bucket '{self.bucket}': {e}", exc_info=True)
            raise StorageError(f"Failed to upload file to bucket: {key}")
        logger.info(f"Uploaded {key} to bucket '{self.bucket}'")
        return self.url_for(key)

    def read(self, key: str) -> bytes:
        key = normalize_key(key)
        try:
            return self._bucket().download(key)
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"Error downloading {key} from bucket '{self.bucket}': {e}")
            raise StorageError(f"Failed to download file from bucket: {key}")

    def delete(self, key: str) -> None:
        key = normalize_key(key)
        try:
            self._bucket().remove([key])
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"Error removing {key} from bucket '{self.bucket}': {e}")
            raise StorageError(f"Failed to delete file from bucket: {key}")

    def _list_folder(self, folder: str, search: str = "") -> List[dict]:
        """List every entry directly under folder, one page at a time."""
        entries = []
        offset = 0
        try:
            while True:
                options = {"limit": LIST_PAGE_SIZE, "offset": offset}
                if search:
                    options["search"] = search
                page = self._bucket().list(folder, options) or []
                entries.extend(page)
                if len(page) < LIST_PAGE_SIZE:
                    return entries
                offset += LIST_PAGE_SIZE
        except StorageError:
            raise
        except Exception as e:
            logger.error(f"Error listing bucket '{self.bucket}': {e}")
            raise StorageError(f"Failed to list bucket: {self.bucket}")

    def _find(self, key: str) -> Optional[dict]:
        key = normalize_key(key)
        folder, _, name = key.rpartition("/")
        for entry in self._list_folder(folder, search=name):
            if entry.get("name") == name and entry.get("id") is not None:
                return entry
        return None

    def exists(self, key: str) -> bool:
        return self._find(key) is not None

    def size(self, key: str) -> Optional[int]:
        entry = self._find(key)
        if entry is None:
            return None
        return (entry.get("metadata") or {}).get("size")

    def list(self, prefix: str = "") -> List[str]:
        keys = []
        pending = [""]
        while pending:
            folder = pending.pop()
            for entry in self._list_folder(folder):
                path = f"{folder}/{entry['name']}" if folder else entry["name"]
                # Folders come back without an id
                if entry.get("id") is None:
                    pending.append(path)
                elif path.startswith(prefix):
                    keys.append(path)
        return sorted(keys)

    def url_for(self, key: str) -> str:
        return self._bucket().get_public_url(normalize_key(key))


def build_storage(backend: str) -> StorageBackend:
    if backend == "local":
        return LocalStorage(settings.UPLOAD_DIR, settings.UPLOAD_URL_PREFIX)
    if backend == "supabase":
        return SupabaseStorage(settings.SUPABASE_URL, settings.SUPABASE_KEY, settings.SUPABASE_BUCKET)
    raise ValueError(f"Unknown storage backend: {backend}")


@lru_cache()
def get_storage() -> StorageBackend:
    logger.info(f"Using '{settings.STORAGE_BACKEND}' storage backend")
    return build_storage(settings.STORAGE_BACKEND)
