from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.infra.storage import StorageBackend, get_storage
from src.routes.deps import require_session
from src.services import upload as upload_service

router = APIRouter(prefix="/api/upload-image", tags=["upload"])


@router.post("", response_model=upload_service.UploadResponse)
async def create_upload(
    request: Request,
    storage: Annotated[StorageBackend, Depends(get_storage)],
) -> upload_service.UploadResponse:
    """세션 확인 후에만 multipart 본문을 읽는다"""
    require_session(request)

    async with request.form() as form:
        return await upload_service.create_upload(form.get("file"), storage)


@router.delete(
    "",
    response_model=upload_service.DeleteResponse,
    dependencies=[Depends(require_session)],
)
async def delete_upload(
    storage: Annotated[StorageBackend, Depends(get_storage)],
    url: str | None = None,
) -> upload_service.DeleteResponse:
    return await upload_service.delete_upload(url, storage)
