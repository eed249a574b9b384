import asyncio
import logging
from pathlib import Path

from .base import StoredImage

logger = logging.getLogger(__name__)


class LocalStorage:
    """로컬 파일 시스템 저장소 구현체 (개발 환경용). BlobStorage로 교체 가능.

    같은 파일명으로 다시 저장하면 경고 없이 덮어쓴다 (last-write-wins).
    """

    def __init__(self, base_dir: Path, base_url: str = "/uploads"):
        self.base_dir = base_dir
        self.base_url = base_url.rstrip("/")

    async def upload_image(self, content: bytes, filename: str) -> StoredImage:
        # exist_ok=True: 동시 요청에서 중복 호출돼도 에러 없음
        await asyncio.to_thread(self.base_dir.mkdir, parents=True, exist_ok=True)

        save_path = self.base_dir / filename
        await asyncio.to_thread(save_path.write_bytes, content)

        return StoredImage(
            url=f"{self.base_url}/{filename}",
            filename=filename,
            size=len(content),
        )

    async def delete_image(self, url: str) -> None:
        """URL 마지막 경로 조각을 파일명으로 보고 삭제. 실패는 로그만 남기고 무시한다."""
        filename = url.split("/")[-1]
        if not filename:
            return

        file_path = self.base_dir / filename
        try:
            await asyncio.to_thread(file_path.unlink)
        except OSError as e:
            logger.warning(f"로컬 파일 삭제 실패: {file_path} - {e}")

    def get_image_url(self, url: str) -> str:
        return url if url.startswith("/") else f"/{url}"
