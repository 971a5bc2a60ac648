"""선호도 → 등급별 디자인 변형 (primary, enhanced, value 순서 고정)"""
from typing import List

from ..models.schemas import Complexity, DesignVariation, Preferences, Tier
from . import design_catalog as catalog


# 생성 순서 = 다운스트림이 위치로 소비하는 계약
TIER_ORDER = (Tier.PRIMARY, Tier.ENHANCED, Tier.VALUE)

TIER_COMPLEXITY = {
    Tier.PRIMARY: Complexity.HIGH,
    Tier.ENHANCED: Complexity.PREMIUM,
    Tier.VALUE: Complexity.STANDARD,
}


def capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def _tier_copy(tier: Tier, preferences: Preferences) -> dict:
    """등급별 이름/설명/추천 이유 문구"""
    style = preferences.kitchen_style
    title = capitalize_first(style)

    if tier is Tier.PRIMARY:
        return {
            "name": f"Custom {title} Design",
            "description": (
                f"A personalized {style} kitchen designed specifically for your Calgary home, "
                "cooking style, and storage needs."
            ),
            "why_this_works": (
                f"This design perfectly matches your {style} style preference while optimizing for your "
                f"{preferences.cooking_habits} cooking habits and {preferences.storage_needs} storage needs. "
                "Perfect for Calgary's lifestyle."
            ),
        }
    if tier is Tier.ENHANCED:
        return {
            "name": f"Premium {title} Collection",
            "description": (
                "An elevated version of your preferred style with luxury features and enhanced "
                "functionality for the discerning Calgary homeowner."
            ),
            "why_this_works": (
                "This premium design builds on your style preferences with luxury materials and advanced "
                "storage solutions for the ultimate Calgary kitchen experience."
            ),
        }
    return {
        "name": f"Smart {title} Value",
        "description": (
            "A cost-effective approach to your preferred style without compromising on Urban Woodspace "
            "quality or functionality."
        ),
        "why_this_works": (
            f"This design delivers your desired {style} aesthetic with smart material choices and efficient "
            "layouts that maximize value for Calgary families."
        ),
    }


def build_variation(preferences: Preferences, tier: Tier) -> DesignVariation:
    return DesignVariation(
        tier=tier,
        cabinet_style=catalog.cabinet_style(preferences.kitchen_style, tier),
        color_palette=catalog.color_palette(preferences.color_preference, tier),
        key_features=catalog.key_features(tier),
        timeline=catalog.timeline(tier),
        complexity=TIER_COMPLEXITY[tier],
        layout_optimization=catalog.layout_optimization(
            preferences.cooking_habits, preferences.storage_needs, tier
        ),
        storage_features=catalog.storage_features(preferences.storage_needs, tier),
        **_tier_copy(tier, preferences),
    )


def create_design_variations(preferences: Preferences) -> List[DesignVariation]:
    """사용자 선호도로 3가지 디자인 변형 생성 (순수 함수)"""
    return [build_variation(preferences, tier) for tier in TIER_ORDER]
