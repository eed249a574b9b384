class ImageLimits:
    ALLOWED_TYPES = frozenset(
        {"image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif"}
    )
    MAX_SIZE = 5 * 1024 * 1024  # 5MB
    CHUNK_SIZE = 1024 * 1024  # 1MB
    DEFAULT_EXTENSION = "jpg"


class UploadFilename:
    RANDOM_LENGTH = 8
    ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"  # base36


class ErrorMessage:
    UNAUTHORIZED = "먼저 로그인해주세요"
    FILE_NOT_FOUND = "파일을 찾을 수 없습니다"
    UNSUPPORTED_FILE_TYPE = "이미지 파일만 지원합니다 (jpg, jpeg, png, webp, gif)"
    FILE_TOO_LARGE = "이미지 크기는 5MB를 초과할 수 없습니다"
    MISSING_URL = "이미지 URL 파라미터가 없습니다"
    UPLOAD_FAILED = "이미지 업로드에 실패했습니다. 다시 시도해주세요"
    DELETE_FAILED = "이미지 삭제에 실패했습니다. 다시 시도해주세요"
