"""예산 구간 × 복잡도 → 비용 범위 문자열"""
from decimal import ROUND_HALF_UP, Decimal

from ..models.schemas import BudgetRange, Complexity
from .design_catalog import enum_key


BUDGET_BRACKETS = {
    BudgetRange.RANGE_25K_40K: (25000, 40000),
    BudgetRange.RANGE_40K_60K: (40000, 60000),
    BudgetRange.RANGE_60K_80K: (60000, 80000),
    BudgetRange.RANGE_80K_100K: (80000, 100000),
    BudgetRange.RANGE_100K_PLUS: (100000, 150000),
}
DEFAULT_BRACKET = (35000, 50000)

COMPLEXITY_MULTIPLIERS = {
    Complexity.STANDARD: Decimal("0.85"),
    Complexity.HIGH: Decimal("1.00"),
    Complexity.PREMIUM: Decimal("1.25"),
}
DEFAULT_MULTIPLIER = Decimal("1.00")


def _round(amount: int, multiplier: Decimal) -> int:
    return int((Decimal(amount) * multiplier).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def estimate_cost(budget_range: str, complexity: str) -> str:
    """예: estimate_cost("60k-80k", "premium") -> "$75,000 - $100,000 CAD" """
    low, high = BUDGET_BRACKETS.get(enum_key(BudgetRange, budget_range), DEFAULT_BRACKET)
    multiplier = COMPLEXITY_MULTIPLIERS.get(enum_key(Complexity, complexity), DEFAULT_MULTIPLIER)

    return f"${_round(low, multiplier):,} - ${_round(high, multiplier):,} CAD"
