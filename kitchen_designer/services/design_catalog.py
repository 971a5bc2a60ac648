"""디자인 변형 조회 테이블

모든 테이블은 읽기 전용 매핑이며 조회 함수마다 명시적 기본값을 가진다.
"""
from types import MappingProxyType
from typing import List, Mapping, Tuple

from ..models.schemas import ColorPreference, KitchenStyle, StorageNeed, Tier


def _frozen(table) -> Mapping:
    return MappingProxyType({key: MappingProxyType(value) if isinstance(value, dict) else value
                             for key, value in table.items()})


DEFAULT_CABINET_STYLE = "Custom cabinet style"
DEFAULT_COLOR_PALETTE = "Custom color palette designed for your space"

CABINET_STYLES = _frozen({
    KitchenStyle.CONTEMPORARY: {
        Tier.PRIMARY: "Flat-panel doors with sleek brushed hardware",
        Tier.ENHANCED: "Handleless flat-panel with integrated pulls and soft-close",
        Tier.VALUE: "Clean flat-panel with modern hardware",
    },
    KitchenStyle.TRADITIONAL: {
        Tier.PRIMARY: "Raised-panel doors with classic brass hardware",
        Tier.ENHANCED: "Detailed raised-panel with crown molding and premium finishes",
        Tier.VALUE: "Simple raised-panel with traditional pulls",
    },
    KitchenStyle.TRANSITIONAL: {
        Tier.PRIMARY: "Shaker-style doors with brushed nickel hardware",
        Tier.ENHANCED: "Premium Shaker with soft-close mechanisms and custom details",
        Tier.VALUE: "Classic Shaker with standard hardware",
    },
    KitchenStyle.MODERN: {
        Tier.PRIMARY: "Ultra-flat doors with minimal linear hardware",
        Tier.ENHANCED: "Integrated handle-less design with push-to-open",
        Tier.VALUE: "Simple flat doors with sleek pulls",
    },
    KitchenStyle.FARMHOUSE: {
        Tier.PRIMARY: "Beadboard doors with rustic bronze hardware",
        Tier.ENHANCED: "Detailed farmhouse with decorative elements and vintage accents",
        Tier.VALUE: "Simple farmhouse style with classic pulls",
    },
    KitchenStyle.SCANDINAVIAN: {
        Tier.PRIMARY: "Light wood doors with minimal black hardware",
        Tier.ENHANCED: "Premium wood grain with integrated handles and natural finishes",
        Tier.VALUE: "Natural wood with simple hardware",
    },
    KitchenStyle.INDUSTRIAL: {
        Tier.PRIMARY: "Metal-accented doors with industrial black hardware",
        Tier.ENHANCED: "Mixed materials with exposed elements and custom metalwork",
        Tier.VALUE: "Industrial-inspired with metal accents",
    },
})

COLOR_PALETTES = _frozen({
    ColorPreference.LIGHT_NEUTRAL: {
        Tier.PRIMARY: "Crisp whites with warm gray accents and quartz counters",
        Tier.ENHANCED: "Premium whites with marble-inspired veining and gold accents",
        Tier.VALUE: "Clean whites with subtle gray undertones",
    },
    ColorPreference.DARK_DRAMATIC: {
        Tier.PRIMARY: "Deep charcoal with contrasting light quartz counters",
        Tier.ENHANCED: "Rich navy with brass accent hardware and marble backsplash",
        Tier.VALUE: "Dark gray with white contrast elements",
    },
    ColorPreference.WARM_WOOD: {
        Tier.PRIMARY: "Natural oak with complementary earth tones and granite",
        Tier.ENHANCED: "Premium walnut with brass accents and natural stone",
        Tier.VALUE: "Warm maple with classic finishes",
    },
    ColorPreference.TWO_TONE: {
        Tier.PRIMARY: "White uppers with gray lowers and coordinated hardware",
        Tier.ENHANCED: "Contrasting island with premium coordinated colors and finishes",
        Tier.VALUE: "Simple two-tone with balanced contrast",
    },
    ColorPreference.BOLD_COLORS: {
        Tier.PRIMARY: "Custom color with neutral balance and modern accents",
        Tier.ENHANCED: "Rich color with premium accent materials and designer touches",
        Tier.VALUE: "Tasteful color with classic combinations",
    },
})

KEY_FEATURES = _frozen({
    Tier.PRIMARY: (
        "Soft-close doors and drawers",
        "Under-cabinet LED lighting",
        "Quartz countertops",
        "Custom storage solutions",
        "Premium hardware finishes",
        "Professional installation",
    ),
    Tier.ENHANCED: (
        "Premium soft-close mechanisms",
        "Integrated LED lighting system",
        "Luxury quartz with waterfall edge",
        "Advanced storage organization",
        "Designer hardware collection",
        "Built-in charging stations",
        "Custom crown molding",
    ),
    Tier.VALUE: (
        "Quality soft-close hinges",
        "LED under-cabinet strips",
        "Durable quartz surfaces",
        "Efficient storage design",
        "Stylish hardware selection",
        "Professional installation",
    ),
})

STORAGE_FEATURES = _frozen({
    StorageNeed.MAXIMUM: (
        "Floor-to-ceiling cabinets with crown molding",
        "Deep drawer systems with full extension slides",
        "Corner cabinet solutions with lazy susans",
        "Pantry organization systems with pull-out shelves",
    ),
    StorageNeed.ORGANIZED: (
        "Pull-out drawer organizers with dividers",
        "Spice rack systems and condiment storage",
        "Divided storage compartments for utensils",
        "Lazy Susan corner units for easy access",
    ),
    StorageNeed.DISPLAY: (
        "Glass-front upper cabinets with interior lighting",
        "Open shelving displays for decorative items",
        "Wine storage features and glass racks",
        "Decorative storage elements and display niches",
    ),
    StorageNeed.HIDDEN: (
        "Integrated appliance panels for seamless look",
        "Hidden storage compartments and secret drawers",
        "Seamless cabinet integration with walls",
        "Concealed organization systems behind doors",
    ),
    StorageNeed.PANTRY: (
        "Walk-in pantry design with custom shelving",
        "Pull-out pantry systems with wire baskets",
        "Food storage organization with clear containers",
        "Bulk storage solutions for Calgary families",
    ),
})

DEFAULT_STORAGE_FEATURES: Tuple[str, ...] = (
    "Custom storage solutions tailored to your needs",
    "Organized cabinet interiors with adjustable shelves",
    "Efficient space utilization for Calgary homes",
    "Quality storage hardware with lifetime warranty",
)

ENHANCED_STORAGE_EXTRAS: Tuple[str, ...] = (
    "Smart storage technology integration",
    "Premium organization systems with soft-close",
)

TIMELINES = _frozen({
    Tier.PRIMARY: "10-12 weeks",
    Tier.ENHANCED: "12-14 weeks",
    Tier.VALUE: "8-10 weeks",
})

# layoutOptimization 문구
FREQUENT_COOK_LAYOUT = (
    "Optimized work triangle for efficient cooking",
    "Multiple prep areas for complex meals",
)
ENTERTAINER_LAYOUT = (
    "Open layout for social cooking and entertaining",
    "Extended counter space for serving guests",
)
MAXIMUM_STORAGE_LAYOUT = (
    "Floor-to-ceiling storage maximization",
    "Corner cabinet optimization with lazy susans",
)
ENHANCED_LAYOUT = (
    "Smart appliance integration zones",
    "Hidden storage solutions and secret compartments",
)
DEFAULT_LAYOUT = (
    "Improved workflow efficiency",
    "Optimized storage placement",
    "Enhanced counter workspace",
)


def enum_key(enum_cls, value: str):
    try:
        return enum_cls(value)
    except ValueError:
        return None


def cooks_frequently(cooking_habits: str) -> bool:
    return "daily" in cooking_habits or "frequent" in cooking_habits


def entertains(cooking_habits: str) -> bool:
    return "entertainer" in cooking_habits


def wants_maximum_storage(storage_needs: str) -> bool:
    return "maximum" in storage_needs


def has_large_family(family_size: str) -> bool:
    return "large" in family_size


def cabinet_style(style: str, tier: Tier) -> str:
    row = CABINET_STYLES.get(enum_key(KitchenStyle, style))
    if row is None:
        return DEFAULT_CABINET_STYLE
    return row[tier]


def color_palette(color_preference: str, tier: Tier) -> str:
    row = COLOR_PALETTES.get(enum_key(ColorPreference, color_preference))
    if row is None:
        return DEFAULT_COLOR_PALETTE
    return row[tier]


def key_features(tier: Tier) -> List[str]:
    return list(KEY_FEATURES[tier])


def storage_features(storage_needs: str, tier: Tier) -> List[str]:
    base = STORAGE_FEATURES.get(enum_key(StorageNeed, storage_needs), DEFAULT_STORAGE_FEATURES)
    if tier is Tier.ENHANCED:
        return [*base, *ENHANCED_STORAGE_EXTRAS]
    return list(base)


def layout_optimization(cooking_habits: str, storage_needs: str, tier: Tier) -> List[str]:
    optimizations: List[str] = []
    if cooks_frequently(cooking_habits):
        optimizations.extend(FREQUENT_COOK_LAYOUT)
    if entertains(cooking_habits):
        optimizations.extend(ENTERTAINER_LAYOUT)
    if wants_maximum_storage(storage_needs):
        optimizations.extend(MAXIMUM_STORAGE_LAYOUT)
    if tier is Tier.ENHANCED:
        optimizations.extend(ENHANCED_LAYOUT)
    return optimizations or list(DEFAULT_LAYOUT)


def timeline(tier: Tier) -> str:
    return TIMELINES[tier]
