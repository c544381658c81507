import logging
import os

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from practicals.core.config import settings
from practicals.core.errors import register_exception_handlers
from practicals.core.logging_config import log_requests, setup_logging
from practicals.database import engine, Base, get_db
from practicals.api.v1 import admin, auth, comments, mock_social, social, uploads, users, videos
from practicals.services.mock_store import mock_store

setup_logging()
logger = logging.getLogger(__name__)

# Create database tables
Base.metadata.create_all(bind=engine)

if settings.SEED_MOCK_DATA:
    mock_store.seed()

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    description="REST API practicals: mock social feed, TikTok clone, JWT auth, uploads and cloud storage"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

register_exception_handlers(app)

# Local uploads are served straight from disk
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

# Include routers
app.include_router(auth.router, prefix=f"{settings.API_V1_STR}/auth", tags=["Authentication"])
app.include_router(users.router, prefix=f"{settings.API_V1_STR}/users", tags=["Users"])
app.include_router(videos.router, prefix=f"{settings.API_V1_STR}/videos", tags=["Videos"])
app.include_router(comments.router, prefix=f"{settings.API_V1_STR}/comments", tags=["Comments"])
app.include_router(social.router, prefix=f"{settings.API_V1_STR}/social", tags=["Social (Likes, Follows)"])
app.include_router(uploads.router, prefix=f"{settings.API_V1_STR}/uploads", tags=["Uploads"])
app.include_router(mock_social.router, prefix=f"{settings.API_V1_STR}/mock", tags=["Mock Social Media"])
app.include_router(admin.router, prefix=f"{settings.API_V1_STR}/admin", tags=["Admin"])

logger.info(f"{settings.APP_NAME} {settings.VERSION} ready")


@app.get("/")
def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        database = "unavailable"
    return {"status": "healthy", "database": database}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("practicals.main:app", host="0.0.0.0", port=8000, reload=True)
