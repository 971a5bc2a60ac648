"""디자인 변형 → 이미지 생성 프롬프트

절(clause) 순서가 계약이다:
기본 문장 → 스타일 → 색상 → 요리 습관 → 가족 규모 → 기술 사양 → 수납 → 지역/품질 마무리
"""
from typing import List, Optional

from ..models.schemas import DesignVariation, KitchenStyle, Preferences
from .design_catalog import cooks_frequently, entertains, enum_key, has_large_family
from .ports import ImageInput


# 스타일별 핵심 묘사
STYLE_CLAUSES = {
    KitchenStyle.CONTEMPORARY: (
        "Clean lines, flat-panel cabinets, minimalist design with sleek hardware and modern appliances. "
    ),
    KitchenStyle.TRADITIONAL: (
        "Classic raised-panel cabinets, elegant details, timeless design with traditional hardware "
        "and warm finishes. "
    ),
    KitchenStyle.TRANSITIONAL: (
        "Shaker-style cabinets blending traditional and modern elements with versatile hardware. "
    ),
    KitchenStyle.MODERN: (
        "Ultra-modern design with handleless cabinets, cutting-edge features, and minimalist aesthetics. "
    ),
    KitchenStyle.FARMHOUSE: (
        "Rustic farmhouse charm with beadboard details, vintage-inspired elements, and cozy warmth. "
    ),
    KitchenStyle.SCANDINAVIAN: (
        "Light wood tones, natural materials, bright and airy Scandinavian design with clean lines. "
    ),
    KitchenStyle.INDUSTRIAL: (
        "Industrial aesthetic with metal accents, urban design elements, and modern functionality. "
    ),
}

FREQUENT_COOK_CLAUSE = (
    "Efficient work triangle layout with multiple prep areas and professional-grade workflow. "
)
ENTERTAINER_CLAUSE = "Open layout perfect for entertaining with large island and social cooking areas. "
LARGE_FAMILY_CLAUSE = "Spacious design accommodating large family needs with ample storage and workspace. "
TECHNICAL_CLAUSE = (
    "{cabinet_style}. Premium quartz countertops, under-cabinet LED lighting, "
    "high-end stainless steel appliances. "
)
STORAGE_CLAUSE = "Storage features: {features}. "
REGIONAL_CLAUSE = "Designed for Calgary homes with practical storage for winter gear and seasonal items. "
CLOSING_CLAUSE = (
    "Professional architectural photography style, perfect natural lighting, 4K quality, "
    "hyperrealistic rendering. The kitchen should look like a high-end interior design magazine photo "
    "with perfect staging, warm lighting, and inviting atmosphere. Show the space as lived-in and "
    "welcoming for a Calgary family."
)

# 프롬프트에 넣는 수납 기능 개수
STORAGE_FEATURE_LIMIT = 3


def _style_clause(style: str) -> str:
    # 정확히 일치하는 스타일만, 모르는 스타일은 절 생략
    return STYLE_CLAUSES.get(enum_key(KitchenStyle, style), "")


def compose_prompt_clauses(design: DesignVariation, preferences: Preferences) -> List[str]:
    cooking = preferences.cooking_habits
    clauses = [
        f"A stunning, photorealistic 3D rendering of a {preferences.kitchen_style} kitchen design "
        "for Urban Woodspace Calgary. ",
        _style_clause(preferences.kitchen_style),
        f"Color scheme: {design.color_palette}. ",
    ]

    if cooks_frequently(cooking):
        clauses.append(FREQUENT_COOK_CLAUSE)
    if entertains(cooking):
        clauses.append(ENTERTAINER_CLAUSE)
    if has_large_family(preferences.family_size):
        clauses.append(LARGE_FAMILY_CLAUSE)

    clauses.append(TECHNICAL_CLAUSE.format(cabinet_style=design.cabinet_style))
    clauses.append(STORAGE_CLAUSE.format(
        features=", ".join(design.storage_features[:STORAGE_FEATURE_LIMIT])
    ))
    clauses.append(REGIONAL_CLAUSE)
    clauses.append(CLOSING_CLAUSE)
    return [clause for clause in clauses if clause]


def create_image_prompt(
    design: DesignVariation,
    preferences: Preferences,
    original_image: Optional[ImageInput] = None,
) -> str:
    """이미지 합성용 프롬프트 생성

    original_image 는 호출 규약상 받지만 텍스트 프롬프트에는 쓰지 않는다.
    """
    return "".join(compose_prompt_clauses(design, preferences))
