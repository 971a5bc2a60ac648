"""비전 분석 텍스트 → SpaceAnalysis 추출

키워드 부분 문자열 매칭만 사용하며 예외를 던지지 않는다.
신호가 없으면 항상 비어 있지 않은 기본값으로 대체한다.
"""
import re
from enum import Enum
from typing import List, Optional, Tuple

from ..models.schemas import SpaceAnalysis


class AnalysisField(str, Enum):
    """한 줄 단위로 추출하는 필드"""
    DIMENSIONS = "dimensions"
    LAYOUT = "layout"
    LIGHTING = "lighting"


# 필드별 키워드
FIELD_KEYWORDS = {
    AnalysisField.DIMENSIONS: ("dimension", "size", "feet", "'"),
    AnalysisField.LAYOUT: ("layout", "galley", "l-shaped", "u-shaped", "island"),
    AnalysisField.LIGHTING: ("light", "window", "bright"),
}

FIELD_DEFAULTS = {
    AnalysisField.DIMENSIONS: "Approximately 10' x 12' kitchen space",
    AnalysisField.LAYOUT: "Standard kitchen layout",
    AnalysisField.LIGHTING: "Natural light from windows",
}

# 10 x 12, 10' x 12' 같은 치수 표기
MEASUREMENT_PATTERN = re.compile(r"\d+\s*'?\s*x\s*\d+")

# (키워드들, 추가할 문구) - 순서대로 검사
FEATURE_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("window",), "Natural lighting from windows"),
    (("ceiling",), "Standard ceiling height"),
    (("floor",), "Existing flooring"),
    (("door",), "Door access points"),
)
DEFAULT_FEATURES = ("Natural lighting", "Standard ceiling height", "Existing flooring")

CHALLENGE_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("small", "limited"), "Limited space optimization"),
    (("old", "dated"), "Outdated design elements"),
    (("storage",), "Insufficient storage"),
    (("light",), "Lighting improvements needed"),
)
DEFAULT_CHALLENGES = ("Space optimization needed", "Storage improvements", "Lighting updates")

STYLE_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("modern", "contemporary"), "Contemporary"),
    (("traditional", "classic"), "Traditional"),
    (("transitional",), "Transitional"),
    (("farmhouse", "rustic"), "Farmhouse"),
)
DEFAULT_STYLES = ("Contemporary", "Traditional", "Transitional")

OPPORTUNITIES = (
    "Maximize vertical storage with tall cabinets",
    "Improve workflow with optimized layout",
    "Add modern lighting solutions",
    "Create more counter workspace",
    "Enhance storage organization",
)

ARCHITECTURAL_ELEMENTS = (
    "Standard wall construction",
    "Existing flooring",
    "Window placement",
    "Door locations",
)

SPACE_OPTIMIZATION = (
    "Optimize work triangle efficiency",
    "Maximize storage capacity",
    "Improve traffic flow",
    "Enhance natural lighting",
)


def _line_matches(field: AnalysisField, line: str) -> bool:
    if any(keyword in line for keyword in FIELD_KEYWORDS[field]):
        return True
    if field is AnalysisField.DIMENSIONS:
        return MEASUREMENT_PATTERN.search(line) is not None
    return False


def extract_line(text: str, field: AnalysisField) -> Optional[str]:
    """필드 키워드가 처음 등장하는 줄 (소문자, 공백 제거)"""
    for line in text.lower().split("\n"):
        stripped = line.strip()
        if stripped and _line_matches(field, stripped):
            return stripped
    return None


def _apply_rules(text: str, rules, default) -> List[str]:
    lowered = text.lower()
    matched = [phrase for keywords, phrase in rules if any(k in lowered for k in keywords)]
    return matched if matched else list(default)


def extract_features(text: str) -> List[str]:
    return _apply_rules(text, FEATURE_RULES, DEFAULT_FEATURES)


def extract_challenges(text: str) -> List[str]:
    return _apply_rules(text, CHALLENGE_RULES, DEFAULT_CHALLENGES)


def extract_recommended_styles(text: str) -> List[str]:
    return _apply_rules(text, STYLE_RULES, DEFAULT_STYLES)


def extract_space_analysis(text: str) -> SpaceAnalysis:
    """분석 텍스트에서 구조화된 공간 요약 생성"""
    text = text or ""

    def line_or_default(field: AnalysisField) -> str:
        return extract_line(text, field) or FIELD_DEFAULTS[field]

    return SpaceAnalysis(
        room_dimensions=line_or_default(AnalysisField.DIMENSIONS),
        layout_type=line_or_default(AnalysisField.LAYOUT),
        existing_features=extract_features(text),
        challenges=extract_challenges(text),
        opportunities=list(OPPORTUNITIES),
        lighting_situation=line_or_default(AnalysisField.LIGHTING),
        architectural_elements=list(ARCHITECTURAL_ELEMENTS),
        recommended_styles=extract_recommended_styles(text),
        space_optimization=list(SPACE_OPTIMIZATION),
    )
