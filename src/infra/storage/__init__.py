"""Storage 모듈

사용법:
    from src.infra.storage import get_storage

    storage = get_storage()
    stored = await storage.upload_image(content, filename)

백엔드 선택 (프로세스당 한 번, 이후 고정):
    - VERCEL 또는 BLOB_READ_WRITE_TOKEN 설정 시: Vercel Blob
    - 그 외: 로컬 파일 시스템 (개발 환경)
"""

import logging
from enum import StrEnum
from pathlib import Path

from src.config import Settings, get_settings

from .base import StorageBackend, StoredImage
from .blob import BlobStorage
from .local import LocalStorage

__all__ = [
    "BlobStorage",
    "LocalStorage",
    "StorageBackend",
    "StorageKind",
    "StoredImage",
    "create_storage",
    "get_storage",
    "select_storage_kind",
    "set_storage",
]

logger = logging.getLogger(__name__)


class StorageKind(StrEnum):
    LOCAL = "local"
    BLOB = "blob"


def select_storage_kind(settings: Settings) -> StorageKind:
    if settings.vercel or settings.blob_read_write_token:
        return StorageKind.BLOB
    return StorageKind.LOCAL


def create_storage(settings: Settings) -> StorageBackend:
    """설정에서 저장소 백엔드 생성"""
    kind = select_storage_kind(settings)
    if kind is StorageKind.BLOB:
        logger.info("[Storage] Vercel Blob 저장소 사용")
        return BlobStorage(
            token=settings.blob_read_write_token,
            api_url=settings.blob_api_url,
            api_version=settings.blob_api_version,
            timeout=settings.blob_timeout,
        )

    # 절대 경로면 그대로, 상대 경로면 작업 디렉토리 기준
    upload_dir = Path.cwd() / settings.uploads_dir
    logger.info(f"[Storage] 로컬 파일 시스템 저장소 사용: {upload_dir}")
    return LocalStorage(base_dir=upload_dir, base_url=settings.uploads_url_path)


class _StorageHolder:
    instance: StorageBackend | None = None


def get_storage() -> StorageBackend:
    if _StorageHolder.instance is None:
        _StorageHolder.instance = create_storage(get_settings())
    return _StorageHolder.instance


def set_storage(storage: StorageBackend | None) -> None:
    """저장소 백엔드 교체 (테스트용)"""
    _StorageHolder.instance = storage
