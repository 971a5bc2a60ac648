import asyncio
import uuid
from io import BytesIO
from pathlib import Path
from typing import Optional

import google.generativeai as genai_old
from google import genai
from google.genai import types
from PIL import Image

from ..config import settings
from ..utils.logger import logger
from .ports import ImageInput, ImageSynthesisError, VisionAnalysisError


class GeminiService:
    """Google Gemini API 서비스 (주방 사진 분석 + 디자인 이미지 합성)"""

    def __init__(self, output_dir: Optional[Path] = None):
        # 설정에서 API 키 로드
        if not settings.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is not configured.")

        # 텍스트/비전 분석용 모델
        genai_old.configure(api_key=settings.gemini_api_key)
        self.model = genai_old.GenerativeModel(settings.gemini_text_model)

        # 이미지 생성용 클라이언트
        self.client = genai.Client(api_key=settings.gemini_api_key)

        self.output_dir = output_dir or settings.upload_path
        self.output_dir.mkdir(parents=True, exist_ok=True)

        logger.info("GeminiService initialized")

    async def analyze(self, image: ImageInput, prompt: str) -> str:
        """주방 사진 분석 → 자유 형식 텍스트"""
        try:
            logger.info(f"Analyzing kitchen image ({len(image.data)} bytes, {image.mime_type})")

            # 블로킹 SDK 호출은 스레드에서 실행
            response = await asyncio.to_thread(
                lambda: self.model.generate_content(
                    [prompt, Image.open(BytesIO(image.data))]
                )
            )

            text = (response.text or "").strip()
            logger.info(f"Kitchen analysis completed: {len(text)} chars")
            return text

        except Exception as e:
            logger.error(f"Kitchen analysis failed: {str(e)}", exc_info=True)
            raise VisionAnalysisError(f"Kitchen analysis failed: {str(e)}") from e

    async def synthesize(self, prompt: str) -> str:
        """프롬프트로 디자인 이미지 생성 후 저장, 공개 URL 반환"""
        try:
            logger.info(f"Generating image with {settings.gemini_image_model}")

            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=settings.gemini_image_model,
                contents=[prompt],
                config=types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"]),
            )

            # 응답에서 이미지 데이터 추출
            parts = response.candidates[0].content.parts if response.candidates else []
            image_data = None

            for part in parts:
                if getattr(part, 'inline_data', None) and part.inline_data.data:
                    image_data = part.inline_data.data
                    break

            if not image_data:
                raise ImageSynthesisError("No image data in Gemini response")

            filename = f"generated_{uuid.uuid4()}.png"
            output_path = self.output_dir / filename

            image = Image.open(BytesIO(image_data))
            image.save(str(output_path))

            logger.info(f"Image saved: {filename}")
            return f"{settings.public_base_url.rstrip('/')}/api/images/{filename}"

        except ImageSynthesisError:
            raise
        except Exception as e:
            logger.error(f"Image generation failed: {type(e).__name__}: {str(e)}", exc_info=True)
            raise ImageSynthesisError(f"Image generation failed: {str(e)}") from e


# 싱글톤 인스턴스
_gemini_service = None

def get_gemini_service() -> GeminiService:
    """GeminiService 인스턴스 가져오기"""
    global _gemini_service
    if _gemini_service is None:
        _gemini_service = GeminiService()
    return _gemini_service
