from typing import Protocol

from pydantic import BaseModel


class StoredImage(BaseModel):
    """저장소 업로드 결과

    filename은 저장소가 부여한 식별자 (요청한 파일명과 다를 수 있음).
    """

    url: str
    filename: str
    size: int


class StorageBackend(Protocol):
    """이미지 저장소 인터페이스. LocalStorage, BlobStorage 구현체로 교체 가능."""

    async def upload_image(self, content: bytes, filename: str) -> StoredImage:
        """
        Raises:
            저장소별 I/O/네트워크 예외를 그대로 전파 (재시도 없음)
        """
        ...

    async def delete_image(self, url: str) -> None: ...

    def get_image_url(self, url: str) -> str: ...
