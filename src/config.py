from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Auth (세션 쿠키 존재 여부만 확인)
    session_cookie_name: str = "secondme_session"

    # Storage 선택 신호
    vercel: str = ""  # Vercel 배포 환경이면 "1"
    blob_read_write_token: str = ""

    # Vercel Blob
    blob_api_url: str = "https://blob.vercel-storage.com"
    blob_api_version: str = "7"
    blob_timeout: int = 30

    # Local storage
    uploads_dir: str = "public/uploads"  # 작업 디렉토리 기준
    uploads_url_path: str = "/uploads"


@lru_cache
def get_settings() -> Settings:
    return Settings()
