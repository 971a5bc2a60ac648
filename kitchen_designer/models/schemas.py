from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Tier(str, Enum):
    """디자인 변형 등급 (순서가 곧 생성 순서)"""
    PRIMARY = "primary"
    ENHANCED = "enhanced"
    VALUE = "value"


class Complexity(str, Enum):
    """시공 복잡도"""
    STANDARD = "standard"
    HIGH = "high"
    PREMIUM = "premium"


class KitchenStyle(str, Enum):
    CONTEMPORARY = "contemporary"
    TRADITIONAL = "traditional"
    TRANSITIONAL = "transitional"
    MODERN = "modern"
    FARMHOUSE = "farmhouse"
    SCANDINAVIAN = "scandinavian"
    INDUSTRIAL = "industrial"


class ColorPreference(str, Enum):
    LIGHT_NEUTRAL = "light-neutral"
    DARK_DRAMATIC = "dark-dramatic"
    WARM_WOOD = "warm-wood"
    TWO_TONE = "two-tone"
    BOLD_COLORS = "bold-colors"


class BudgetRange(str, Enum):
    RANGE_25K_40K = "25k-40k"
    RANGE_40K_60K = "40k-60k"
    RANGE_60K_80K = "60k-80k"
    RANGE_80K_100K = "80k-100k"
    RANGE_100K_PLUS = "100k-plus"


class StorageNeed(str, Enum):
    MAXIMUM = "maximum-storage"
    ORGANIZED = "organized-storage"
    DISPLAY = "display-storage"
    HIDDEN = "hidden-storage"
    PANTRY = "pantry-storage"


class ImageStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


class CamelModel(BaseModel):
    """camelCase 와이어 포맷 (입력은 snake_case 도 허용)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Preferences(CamelModel):
    """사용자 디자인 선호도

    알려지지 않은 값도 허용하며, 조회 테이블에서 기본값으로 처리된다.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    kitchen_style: str
    color_preference: str
    budget_range: str
    storage_needs: str
    cooking_habits: str
    family_size: str


class Contact(CamelModel):
    """리드 연락처"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    email: str
    phone: Optional[str] = None


class SpaceAnalysis(CamelModel):
    """주방 공간 분석 요약 (모든 필드는 비어 있지 않음)"""
    room_dimensions: str = Field(..., min_length=1)
    layout_type: str = Field(..., min_length=1)
    existing_features: List[str] = Field(..., min_length=1)
    challenges: List[str] = Field(..., min_length=1)
    opportunities: List[str] = Field(..., min_length=1)
    lighting_situation: str = Field(..., min_length=1)
    architectural_elements: List[str] = Field(..., min_length=1)
    recommended_styles: List[str] = Field(..., min_length=1)
    space_optimization: List[str] = Field(..., min_length=1)


class DesignVariation(CamelModel):
    """등급별 디자인 사양"""
    tier: Tier
    name: str
    description: str
    cabinet_style: str
    color_palette: str
    key_features: List[str]
    timeline: str
    complexity: Complexity
    why_this_works: str
    layout_optimization: List[str]
    storage_features: List[str]


class GeneratedDesign(DesignVariation):
    """이미지 생성 결과가 붙은 디자인 (이미지 필드는 성공 시에만 존재)"""
    estimated_cost: str
    image_status: ImageStatus
    generated_image: Optional[str] = None
    image_prompt: Optional[str] = None


class GenerationStats(CamelModel):
    images_generated: int = 0
    images_failed: int = 0


class AnalyzeResult(CamelModel):
    success: Literal[True] = True
    space_analysis: SpaceAnalysis
    original_analysis: str


class GenerateResult(CamelModel):
    success: Literal[True] = True
    designs: List[GeneratedDesign]
    stats: GenerationStats
    message: str


class FailureResult(CamelModel):
    success: Literal[False] = False
    error: str
