"""BlobStorage 테스트 (httpx.MockTransport로 Vercel Blob API 대체)"""

import json

import httpx
import pytest

from src.infra.storage.blob import BlobStorage

BLOB_URL = "https://abc.public.blob.vercel-storage.com"


def make_storage(handler: object) -> BlobStorage:
    return BlobStorage(
        token="vercel_blob_rw_test",
        api_url="https://blob.test",
        api_version="7",
        transport=httpx.MockTransport(handler),  # type: ignore[arg-type]
    )


class TestBlobStorageUpload:
    async def test_upload_returns_service_url_and_pathname(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200,
                json={
                    "url": f"{BLOB_URL}/123-abc-Xy9Z.jpg",
                    "pathname": "123-abc-Xy9Z.jpg",
                },
            )

        stored = await make_storage(handler).upload_image(b"jpeg bytes", "123-abc.jpg")

        assert stored.url == f"{BLOB_URL}/123-abc-Xy9Z.jpg"
        assert stored.filename == "123-abc-Xy9Z.jpg"
        assert stored.size == len(b"jpeg bytes")

        request = requests[0]
        assert request.method == "PUT"
        assert request.url.params["pathname"] == "123-abc.jpg"
        assert request.headers["authorization"] == "Bearer vercel_blob_rw_test"
        assert request.headers["x-vercel-blob-access"] == "public"
        assert request.content == b"jpeg bytes"

    async def test_upload_error_propagates(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, json={"error": {"code": "forbidden"}})

        with pytest.raises(httpx.HTTPStatusError):
            await make_storage(handler).upload_image(b"content", "a.jpg")

    async def test_network_error_propagates(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            await make_storage(handler).upload_image(b"content", "a.jpg")


class TestBlobStorageDelete:
    async def test_delete_posts_url(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={})

        await make_storage(handler).delete_image(f"{BLOB_URL}/a.jpg")

        assert requests[0].method == "POST"
        assert requests[0].url.path == "/delete"
        assert json.loads(requests[0].content) == {"urls": [f"{BLOB_URL}/a.jpg"]}

    async def test_delete_missing_object_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": {"code": "not_found"}})

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await make_storage(handler).delete_image(f"{BLOB_URL}/missing.jpg")

        assert exc_info.value.response.status_code == 404


class TestBlobStorageGetImageUrl:
    @pytest.mark.parametrize("url", [f"{BLOB_URL}/a.jpg", "/uploads/a.jpg"])
    def test_passthrough_is_idempotent(self, url: str) -> None:
        storage = BlobStorage(token="t", api_url="https://blob.test", api_version="7")

        assert storage.get_image_url(url) == url
        assert storage.get_image_url(storage.get_image_url(url)) == url
