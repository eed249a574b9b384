"""Upload 서비스: 이미지 검증 → 파일명 생성 → 저장소 위임

저장소 백엔드는 호출자가 주입한다 (route에서 Depends(get_storage)).
"""

import logging
import secrets
import time
from datetime import UTC, datetime
from pathlib import Path

from starlette.datastructures import UploadFile

from src.constants import ErrorMessage, ImageLimits, UploadFilename
from src.infra.storage import StorageBackend
from src.schemas.base import BaseSchema

logger = logging.getLogger(__name__)


class UploadError(Exception):
    """업로드/삭제 요청 에러

    code로 구체적인 원인 구분:
    - UNAUTHORIZED: 세션 쿠키 없음 (401)
    - FILE_NOT_FOUND, UNSUPPORTED_FILE_TYPE, FILE_TOO_LARGE, MISSING_URL: 입력 오류 (400)
    - UPLOAD_FAILED, DELETE_FAILED: 저장소 오류 (500)
    """

    STATUS_MAP: dict[str, int] = {
        "UNAUTHORIZED": 401,
        "FILE_NOT_FOUND": 400,
        "UNSUPPORTED_FILE_TYPE": 400,
        "FILE_TOO_LARGE": 400,
        "MISSING_URL": 400,
        "UPLOAD_FAILED": 500,
        "DELETE_FAILED": 500,
    }

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")

    @property
    def status_code(self) -> int:
        return self.STATUS_MAP.get(self.code, 500)


class UploadResponse(BaseSchema):
    url: str
    filename: str
    size: int
    uploaded_at: str


class DeleteResponse(BaseSchema):
    success: bool


def generate_filename(original_filename: str | None) -> str:
    """`{epoch-millis}-{base36 8자}.{확장자}` 형식 파일명 생성

    충돌 확률은 무시할 수준이지만 암호학적으로 보장하지 않는다.
    """
    timestamp = int(time.time() * 1000)
    random_str = "".join(
        secrets.choice(UploadFilename.ALPHABET) for _ in range(UploadFilename.RANDOM_LENGTH)
    )
    ext = Path(original_filename or "").suffix.lstrip(".") or ImageLimits.DEFAULT_EXTENSION
    return f"{timestamp}-{random_str}.{ext}"


def _now_iso() -> str:
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _validate_content_type(content_type: str | None) -> None:
    if content_type not in ImageLimits.ALLOWED_TYPES:
        raise UploadError("UNSUPPORTED_FILE_TYPE", ErrorMessage.UNSUPPORTED_FILE_TYPE)


def _validate_size_header(size: int | None) -> None:
    if size is not None and size > ImageLimits.MAX_SIZE:
        raise UploadError("FILE_TOO_LARGE", ErrorMessage.FILE_TOO_LARGE)


async def _read_with_size_limit(file: UploadFile) -> bytes:
    """선언된 크기와 무관하게 실제로 읽은 바이트 수로 한 번 더 검사"""
    chunks: list[bytes] = []
    total_size = 0

    while chunk := await file.read(ImageLimits.CHUNK_SIZE):
        total_size += len(chunk)
        if total_size > ImageLimits.MAX_SIZE:
            raise UploadError("FILE_TOO_LARGE", ErrorMessage.FILE_TOO_LARGE)
        chunks.append(chunk)

    return b"".join(chunks)


async def create_upload(file: UploadFile | str | None, storage: StorageBackend) -> UploadResponse:
    """
    Raises:
        UploadError(400): 파일 없음 (file 필드가 텍스트인 경우 포함), 형식 또는 크기 위반
        UploadError(500): 저장소 업로드 실패 (상세 내용은 서버 로그에만)
    """
    if not isinstance(file, UploadFile):
        raise UploadError("FILE_NOT_FOUND", ErrorMessage.FILE_NOT_FOUND)

    _validate_content_type(file.content_type)
    _validate_size_header(file.size)
    content = await _read_with_size_limit(file)

    filename = generate_filename(file.filename)

    try:
        stored = await storage.upload_image(content, filename)
    except Exception:
        logger.exception(f"이미지 업로드 실패: {filename}")
        raise UploadError("UPLOAD_FAILED", ErrorMessage.UPLOAD_FAILED) from None

    logger.info(f"이미지 업로드 완료: {stored.filename} ({stored.size} bytes)")

    return UploadResponse(
        url=stored.url,
        filename=stored.filename,
        size=stored.size,
        uploaded_at=_now_iso(),
    )


async def delete_upload(url: str | None, storage: StorageBackend) -> DeleteResponse:
    """
    Raises:
        UploadError(400): url 파라미터 없음
        UploadError(500): 저장소 삭제 실패 (로컬 저장소는 실패를 내부에서 무시)
    """
    if not url:
        raise UploadError("MISSING_URL", ErrorMessage.MISSING_URL)

    try:
        await storage.delete_image(url)
    except Exception:
        logger.exception(f"이미지 삭제 실패: {url}")
        raise UploadError("DELETE_FAILED", ErrorMessage.DELETE_FAILED) from None

    return DeleteResponse(success=True)
