import tempfile
from collections.abc import Generator
from io import BytesIO
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from src.config import get_settings
from src.infra.storage import StoredImage, set_storage
from src.infra.storage.local import LocalStorage
from src.main import app


def make_test_image(width: int = 800, height: int = 1200, fmt: str = "JPEG") -> BytesIO:
    """테스트용 실제 이미지 바이트 생성"""
    img = Image.new("RGB", (width, height), color="red")
    buf = BytesIO()
    img.save(buf, format=fmt)
    buf.seek(0)
    return buf


class InMemoryStorage:
    """StorageBackend 테스트 더블. 호출 기록을 남긴다."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.upload_calls: list[str] = []
        self.delete_calls: list[str] = []

    async def upload_image(self, content: bytes, filename: str) -> StoredImage:
        self.upload_calls.append(filename)
        self.files[filename] = content
        return StoredImage(url=f"memory://{filename}", filename=filename, size=len(content))

    async def delete_image(self, url: str) -> None:
        self.delete_calls.append(url)
        self.files.pop(url.removeprefix("memory://"), None)

    def get_image_url(self, url: str) -> str:
        return url


class FailingStorage:
    """항상 내부 에러를 내는 저장소"""

    async def upload_image(self, content: bytes, filename: str) -> StoredImage:
        raise RuntimeError("bucket credentials leaked: sk_live_secret")

    async def delete_image(self, url: str) -> None:
        raise RuntimeError("bucket credentials leaked: sk_live_secret")

    def get_image_url(self, url: str) -> str:
        return url


@pytest.fixture
def temp_upload_dir() -> Generator[Path, None, None]:
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def local_storage(temp_upload_dir: Path) -> LocalStorage:
    return LocalStorage(base_dir=temp_upload_dir, base_url="/uploads")


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def client(local_storage: LocalStorage) -> Generator[TestClient, None, None]:
    set_storage(local_storage)
    yield TestClient(app)
    set_storage(None)


@pytest.fixture
def auth_client(client: TestClient) -> TestClient:
    client.cookies.set(get_settings().session_cookie_name, "session-token")
    return client
