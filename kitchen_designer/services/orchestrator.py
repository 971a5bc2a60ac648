"""디자인 변형별 이미지 생성 오케스트레이션

변형 하나의 실패가 나머지 처리를 막지 않으며, 예외는 밖으로 나가지 않는다.
외부 API 분당 호출 제한 때문에 순차 처리한다.
"""
import time
from typing import List, Optional, Sequence, Tuple

from ..models.schemas import (
    DesignVariation,
    GeneratedDesign,
    GenerationStats,
    ImageStatus,
    Preferences,
)
from ..utils.logger import logger
from .cost_estimator import estimate_cost
from .design_variations import create_design_variations
from .ports import ImageInput, ImageSynthesizer
from .prompt_composer import create_image_prompt


def summarize(designs: Sequence[GeneratedDesign]) -> GenerationStats:
    """결과 목록에서 성공/실패 통계 계산"""
    generated = sum(1 for d in designs if d.image_status is ImageStatus.SUCCESS)
    return GenerationStats(images_generated=generated, images_failed=len(designs) - generated)


class GenerationOrchestrator:
    """선호도 → 3개 디자인 + 통계"""

    def __init__(self, synthesizer: ImageSynthesizer):
        self.synthesizer = synthesizer

    def _to_design(
        self,
        variation: DesignVariation,
        preferences: Preferences,
        image_url: Optional[str] = None,
        prompt: Optional[str] = None,
    ) -> GeneratedDesign:
        status = ImageStatus.SUCCESS if image_url else ImageStatus.FAILED
        return GeneratedDesign(
            **variation.model_dump(),
            estimated_cost=estimate_cost(preferences.budget_range, variation.complexity),
            image_status=status,
            generated_image=image_url if image_url else None,
            image_prompt=prompt if image_url else None,
        )

    async def generate_one(
        self,
        variation: DesignVariation,
        preferences: Preferences,
        original_image: Optional[ImageInput] = None,
    ) -> GeneratedDesign:
        """변형 하나에 대해 정확히 한 번 시도"""
        try:
            prompt = create_image_prompt(variation, preferences, original_image)
            start = time.time()
            image_url = await self.synthesizer.synthesize(prompt)
            if not image_url:
                raise ValueError("No image URL returned")
        except Exception as e:
            logger.error(f"Failed to generate {variation.name}: {type(e).__name__}: {str(e)}", exc_info=True)
            return self._to_design(variation, preferences)

        logger.info(f"{variation.name} generated successfully in {time.time() - start:.2f}s")
        return self._to_design(variation, preferences, image_url, prompt)

    async def run(
        self,
        preferences: Preferences,
        original_image: Optional[ImageInput] = None,
    ) -> Tuple[List[GeneratedDesign], GenerationStats]:
        variations = create_design_variations(preferences)
        designs: List[GeneratedDesign] = []

        for index, variation in enumerate(variations, start=1):
            logger.info(f"Generating {variation.name} design ({index}/{len(variations)})")
            designs.append(await self.generate_one(variation, preferences, original_image))

        stats = summarize(designs)
        logger.info(
            f"Design generation complete: {stats.images_generated} successful, "
            f"{stats.images_failed} failed"
        )
        return designs, stats
