"""Vercel Blob 저장소 구현체 (HTTP API)"""

import httpx

from .base import StoredImage


class BlobStorage:
    """Vercel Blob에 public 접근 권한으로 저장. URL은 CDN 절대 경로.

    API 주소와 버전 기본값은 Settings(blob_api_url, blob_api_version)에서만 관리한다.

    삭제 실패는 그대로 전파한다 (LocalStorage와 다름).
    """

    def __init__(
        self,
        token: str,
        api_url: str,
        api_version: str,
        timeout: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._api_version = api_version
        self._timeout = timeout
        self._transport = transport

    async def upload_image(self, content: bytes, filename: str) -> StoredImage:
        """
        Raises:
            httpx.HTTPError: 네트워크 오류 또는 API 에러 응답
        """
        async with self._client() as client:
            resp = await client.put(
                f"{self._api_url}/",
                params={"pathname": filename},
                content=content,
                headers={"x-vercel-blob-access": "public"},
            )
            resp.raise_for_status()

        data = resp.json()
        # size는 선언된 값이 아니라 실제 업로드한 바이트 수
        return StoredImage(url=data["url"], filename=data["pathname"], size=len(content))

    async def delete_image(self, url: str) -> None:
        """
        Raises:
            httpx.HTTPError: 네트워크 오류, 존재하지 않는 blob, 권한 오류
        """
        async with self._client() as client:
            resp = await client.post(f"{self._api_url}/delete", json={"urls": [url]})
            resp.raise_for_status()

    def get_image_url(self, url: str) -> str:
        return url

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            headers={
                "authorization": f"Bearer {self._token}",
                "x-api-version": self._api_version,
            },
        )
