from fastapi import Request

from src.config import get_settings
from src.constants import ErrorMessage
from src.services.upload import UploadError


def require_session(request: Request) -> str:
    """세션 쿠키 존재 여부만 확인 (서명/만료 검증은 인증 서비스 담당)

    Raises:
        UploadError(401): 세션 쿠키 없음
    """
    session = request.cookies.get(get_settings().session_cookie_name)
    if session is None:
        raise UploadError("UNAUTHORIZED", ErrorMessage.UNAUTHORIZED)
    return session
