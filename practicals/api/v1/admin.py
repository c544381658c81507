import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from practicals.api.deps import require_admin
from practicals.core.config import settings
from practicals.core.errors import BadRequestError
from practicals.database import get_db
from practicals.models.user import User
from practicals.schemas.storage import MigrationReport
from practicals.services.migration import run_migration
from practicals.services.storage import StorageBackend, build_storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter()


def get_local_storage() -> StorageBackend:
    return build_storage("local")


@router.post("/storage/migrate", response_model=MigrationReport)
def migrate_local_storage(
    prefix: str = "",
    overwrite: bool = False,
    dry_run: bool = False,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
    source: StorageBackend = Depends(get_local_storage),
    target: StorageBackend = Depends(get_storage)
):
    if target.name == source.name:
        raise BadRequestError(
            f"Configured storage backend is '{settings.STORAGE_BACKEND}'; nothing to migrate to",
            code="SAME_BACKEND"
        )

    logger.info(f"Admin {admin.id} started storage migration to {target.name}")
    return run_migration(db, source, target, prefix=prefix, overwrite=overwrite, dry_run=dry_run)
