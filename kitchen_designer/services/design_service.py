"""요청 단위 진입점: action 에 따라 분석 또는 디자인 생성"""
import json
from typing import Any, Mapping, Union

from ..models.schemas import (
    AnalyzeResult,
    Contact,
    FailureResult,
    GenerateResult,
    Preferences,
)
from ..utils.logger import logger
from .analysis_extractor import extract_space_analysis
from .orchestrator import GenerationOrchestrator
from .ports import ImageInput, ImageSynthesizer, LeadSink, VisionAnalyzer


ACTION_ANALYZE = "analyze"
ACTION_GENERATE = "generate"

INVALID_ACTION_ERROR = "Invalid action"
GENERIC_ERROR = "Failed to process request. Please try again."
ANALYSIS_UNAVAILABLE = "Analysis not available"

KITCHEN_ANALYSIS_PROMPT = """As a professional kitchen designer for Urban Woodspace in Calgary, analyze this kitchen space in detail. Provide:

1. LAYOUT ANALYSIS:
   - Layout type (galley, L-shaped, U-shaped, island, peninsula, etc.)
   - Approximate room dimensions in feet
   - Traffic flow patterns
   - Work triangle efficiency

2. EXISTING FEATURES:
   - Window locations and natural light
   - Door placements
   - Ceiling height and architectural details
   - Current flooring type
   - Wall materials and colors
   - Existing appliances (if any)

3. SPACE ASSESSMENT:
   - Current cabinet style and condition
   - Counter space availability
   - Storage capacity
   - Lighting situation (natural and artificial)

4. DESIGN OPPORTUNITIES:
   - Key challenges to address
   - Space optimization potential
   - Storage improvement opportunities
   - Layout enhancement possibilities

5. STYLE RECOMMENDATIONS:
   - Which kitchen styles would work best in this space
   - Color palette suggestions based on lighting
   - Material recommendations for Calgary homes

Please be specific and detailed in your analysis, considering Calgary's climate and lifestyle."""

RawModel = Union[str, Mapping[str, Any], None]


def _parse(model_cls, raw):
    """JSON 문자열 / dict / 모델 인스턴스 → 모델 (잘못된 입력은 예외)"""
    if isinstance(raw, model_cls):
        return raw
    if isinstance(raw, (str, bytes)):
        raw = json.loads(raw)
    return model_cls.model_validate(raw)


class KitchenDesignService:
    """분석/생성 요청 처리. 어떤 실패도 예외 대신 실패 결과로 돌려준다."""

    def __init__(
        self,
        vision: VisionAnalyzer,
        synthesizer: ImageSynthesizer,
        lead_sink: LeadSink,
    ):
        self.vision = vision
        self.lead_sink = lead_sink
        self.orchestrator = GenerationOrchestrator(synthesizer)

    async def analyze(self, image: ImageInput) -> AnalyzeResult:
        logger.info("Analyzing kitchen space")
        analysis_text = await self.vision.analyze(image, KITCHEN_ANALYSIS_PROMPT)
        analysis_text = analysis_text or ANALYSIS_UNAVAILABLE

        space_analysis = extract_space_analysis(analysis_text)
        logger.info(f"Space analysis completed: {space_analysis.layout_type[:50]}")
        return AnalyzeResult(space_analysis=space_analysis, original_analysis=analysis_text)

    async def generate(
        self,
        image: ImageInput,
        preferences: Preferences,
        contact: Contact,
    ) -> GenerateResult:
        logger.info(f"Generating designs for {contact.name} with {preferences.kitchen_style} style")
        self.lead_sink.record(contact, preferences)

        designs, stats = await self.orchestrator.run(preferences, image)
        return GenerateResult(
            designs=designs,
            stats=stats,
            message=(
                f"Generated {stats.images_generated} personalized kitchen designs for Urban Woodspace!"
            ),
        )

    async def handle(
        self,
        action: str,
        image: ImageInput,
        preferences: RawModel = None,
        contact: RawModel = None,
    ) -> Union[AnalyzeResult, GenerateResult, FailureResult]:
        try:
            if action == ACTION_ANALYZE:
                return await self.analyze(image)

            if action == ACTION_GENERATE:
                return await self.generate(
                    image,
                    _parse(Preferences, preferences),
                    _parse(Contact, contact),
                )

            logger.warning(f"Invalid action requested: {action!r}")
            return FailureResult(error=INVALID_ACTION_ERROR)

        except Exception as e:
            logger.error(f"AI design error: {type(e).__name__}: {str(e)}", exc_info=True)
            return FailureResult(error=GENERIC_ERROR)
