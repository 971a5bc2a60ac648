from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import FileResponse, JSONResponse
from typing import Optional

from ..config import settings
from ..models.schemas import FailureResult
from ..services.design_service import INVALID_ACTION_ERROR, KitchenDesignService
from ..services.gemini_service import get_gemini_service
from ..services.lead_log import LeadLogger
from ..services.ports import ImageInput, RateLimiter
from ..services.rate_limiter import SlidingWindowRateLimiter
from ..utils.logger import logger

router = APIRouter(prefix="/api", tags=["design"])

# IP 기반 요청 제한 (프로세스 단위)
_rate_limiter = SlidingWindowRateLimiter(
    max_requests=settings.rate_limit_requests,
    window_seconds=settings.rate_limit_window_seconds,
)

CHUNK_SIZE = 1024 * 1024  # 1MB chunks


def get_rate_limiter() -> RateLimiter:
    return _rate_limiter


def get_design_service() -> Optional[KitchenDesignService]:
    """API 키가 없으면 None (라우트에서 500 응답)"""
    if not settings.gemini_api_key:
        return None
    gemini = get_gemini_service()
    return KitchenDesignService(vision=gemini, synthesizer=gemini, lead_sink=LeadLogger())


def client_key(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def _failure(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=FailureResult(error=error).to_response())


async def _read_limited(file: UploadFile, max_size: int) -> Optional[bytes]:
    """최대 크기를 넘으면 None"""
    content = bytearray()
    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        content.extend(chunk)
        if len(content) > max_size:
            return None
    return bytes(content)


@router.post("/ai-design-visual")
async def ai_design_visual(
    request: Request,
    image: Optional[UploadFile] = File(None),
    action: str = Form(""),
    preferences: Optional[str] = Form(None),
    contact: Optional[str] = Form(None),
    limiter: RateLimiter = Depends(get_rate_limiter),
    service: Optional[KitchenDesignService] = Depends(get_design_service),
):
    """주방 사진 분석 (action=analyze) 또는 디자인 3종 생성 (action=generate)"""
    key = client_key(request)
    decision = limiter.check(key)
    if not decision.allowed:
        logger.warning(f"Rate limit exceeded for {key}")
        response = _failure(429, "Rate limit exceeded. Please try again later.")
        if decision.retry_after is not None:
            response.headers["Retry-After"] = str(int(decision.retry_after) + 1)
        return response

    if image is None:
        return _failure(400, "No image provided")

    if service is None:
        logger.error("GEMINI_API_KEY is not configured")
        return _failure(500, "AI service temporarily unavailable")

    max_size = settings.max_upload_size_mb * 1024 * 1024
    content = await _read_limited(image, max_size)
    if content is None:
        logger.warning(f"Image too large: {image.filename}")
        return _failure(400, f"Image too large. Please use an image under {settings.max_upload_size_mb}MB.")

    content_type = image.content_type or ""
    if not content_type.startswith("image/"):
        logger.warning(f"Invalid content type: {content_type}")
        return _failure(400, "Please upload a valid image file.")

    logger.info(f"Request {action!r} from {key}: {image.filename} ({len(content)} bytes)")

    result = await service.handle(
        action,
        ImageInput(data=content, mime_type=content_type),
        preferences=preferences,
        contact=contact,
    )

    if isinstance(result, FailureResult):
        status_code = 400 if result.error == INVALID_ACTION_ERROR else 500
        return JSONResponse(status_code=status_code, content=result.to_response())

    return JSONResponse(content=result.to_response())


@router.get("/images/{filename}")
async def get_image(filename: str):
    """생성된 이미지 파일 반환"""
    file_path = settings.upload_path / filename

    if filename != file_path.name or not file_path.exists():
        raise HTTPException(status_code=404, detail="Image not found.")

    return FileResponse(str(file_path))
