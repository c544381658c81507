"""
Move stored media from one storage backend to another.

Used to migrate files written to the local upload directory into a Supabase
bucket, and to point database URLs at the new location afterwards.

Run from the command line:

    python -m practicals.services.migration --source local --target supabase
"""
import argparse
import logging
import mimetypes
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from practicals.core.logging_config import setup_logging
from practicals.database import SessionLocal
from practicals.models import User, Video
from practicals.schemas.storage import MigrationReport
from practicals.services.storage import StorageBackend, StorageError, build_storage

logger = logging.getLogger(__name__)


def migrate_storage(
    source: StorageBackend,
    target: StorageBackend,
    prefix: str = "",
    overwrite: bool = False,
    dry_run: bool = False,
) -> MigrationReport:
    """
    Copy every object under prefix from source to target.

    Objects already in the target are skipped unless overwrite is set. A failed
    object is recorded in the report and the run carries on with the rest.
    """
    report = MigrationReport(source=source.name, target=target.name, dry_run=dry_run)
    keys = source.list(prefix)
    logger.info(f"Migrating {len(keys)} objects from {source.name} to {target.name} (dry_run={dry_run})")

    for key in keys:
        try:
            if not overwrite and target.exists(key):
                report.skipped.append(key)
                continue
            if not dry_run:
                target.save(key, source.read(key), mimetypes.guess_type(key)[0])
            report.copied.append(key)
        except StorageError as e:
            logger.error(f"Failed to migrate {key}: {e.message}")
            report.failed.append(key)

    logger.info(
        f"Migration finished: {len(report.copied)} copied, "
        f"{len(report.skipped)} skipped, {len(report.failed)} failed"
    )
    return report


def _source_key(url: Optional[str], source: StorageBackend) -> Optional[str]:
    """Return the storage key behind a source URL, or None when url is not a source URL."""
    if not url:
        return None
    base = source.url_for("_").rsplit("_", 1)[0]
    if not url.startswith(base):
        return None
    return url[len(base):].split("?", 1)[0] or None


def rewrite_media_urls(
    db: Session,
    source: StorageBackend,
    target: StorageBackend,
    keys: Iterable[str],
) -> int:
    """
    Point Video.url, Video.thumbUrl and User.avatarUrl at the target backend.

    Only URLs whose key is in keys are touched, so a URL never moves to an
    object the target does not hold.
    """
    migrated = set(keys)
    rewritten = 0

    def translate(url):
        key = _source_key(url, source)
        if key is None or key not in migrated:
            return None
        return target.url_for(key)

    for video in db.query(Video).all():
        for field in ("url", "thumbUrl"):
            new_url = translate(getattr(video, field))
            if new_url:
                setattr(video, field, new_url)
                rewritten += 1
    for user in db.query(User).filter(User.avatarUrl.isnot(None)).all():
        new_url = translate(user.avatarUrl)
        if new_url:
            user.avatarUrl = new_url
            rewritten += 1
    db.commit()
    logger.info(f"Rewrote {rewritten} media URLs from {source.name} to {target.name}")
    return rewritten


def run_migration(
    db: Session,
    source: StorageBackend,
    target: StorageBackend,
    prefix: str = "",
    overwrite: bool = False,
    dry_run: bool = False,
) -> MigrationReport:
    report = migrate_storage(source, target, prefix=prefix, overwrite=overwrite, dry_run=dry_run)
    # URLs only move once every object made it across, and only to objects the target holds
    if not dry_run and report.ok:
        report.urls_rewritten = rewrite_media_urls(db, source, target, report.copied + report.skipped)
    return report


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Migrate stored media between storage backends")
    parser.add_argument("--source", default="local", choices=["local", "supabase"])
    parser.add_argument("--target", default="supabase", choices=["local", "supabase"])
    parser.add_argument("--prefix", default="")
    parser.add_argument("--overwrite", action="store_true")
    parser.add_argument("--dry-run", action="store_true")
    args = parser.parse_args(argv)

    setup_logging()
    if args.source == args.target:
        parser.error("source and target must differ")

    db = SessionLocal()
    try:
        report = run_migration(
            db,
            build_storage(args.source),
            build_storage(args.target),
            prefix=args.prefix,
            overwrite=args.overwrite,
            dry_run=args.dry_run,
        )
    finally:
        db.close()

    print(report.model_dump_json(indent=2))
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
