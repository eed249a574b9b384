import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config import get_settings
from src.infra.storage import get_storage
from src.infra.storage.local import LocalStorage
from src.routes.upload import router as upload_router
from src.services.upload import UploadError

settings = get_settings()
logging.basicConfig(level=settings.log_level)

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type"],
    max_age=600,
)


# 모든 에러 응답은 {"error": 메시지} 형태로 통일
@app.exception_handler(UploadError)
async def upload_error_handler(request: Request, exc: UploadError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """multipart 파싱 실패(400), 없는 경로(404), 허용되지 않은 메서드(405) 등"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers,
    )


app.include_router(upload_router)

# 프로세스 시작 시 저장소 바인딩. LocalStorage인 경우에만 업로드 디렉토리 공개
storage = get_storage()
if isinstance(storage, LocalStorage):
    app.mount(
        settings.uploads_url_path,
        StaticFiles(directory=storage.base_dir, check_dir=False),
        name="uploads",
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
