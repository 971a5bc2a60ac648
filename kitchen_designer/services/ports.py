"""코어가 호출하는 외부 기능 인터페이스 (구현은 바깥에서 주입)"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from ..models.schemas import Contact, Preferences


class CapabilityError(Exception):
    """외부 AI 기능 호출 실패"""


class VisionAnalysisError(CapabilityError):
    pass


class ImageSynthesisError(CapabilityError):
    pass


@dataclass(frozen=True)
class ImageInput:
    """업로드된 원본 이미지"""
    data: bytes
    mime_type: str = "image/jpeg"


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    remaining: int
    retry_after: Optional[float] = None


class VisionAnalyzer(Protocol):
    async def analyze(self, image: ImageInput, prompt: str) -> str:
        ...


class ImageSynthesizer(Protocol):
    async def synthesize(self, prompt: str) -> str:
        """생성된 이미지 URL 반환 (실패 시 예외 또는 빈 문자열)"""
        ...


class LeadSink(Protocol):
    def record(self, contact: Contact, preferences: Preferences) -> Dict[str, Any]:
        ...


class RateLimiter(Protocol):
    def check(self, key: str) -> RateLimitDecision:
        ...
