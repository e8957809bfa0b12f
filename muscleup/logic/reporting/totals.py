"""Plan totals aggregation."""
from decimal import Decimal
from typing import Optional

from muscleup.domain.MealLedger import MealLedger
from muscleup.domain.PlanTotals import PlanTotals


def compute_plan_totals(ledger: Optional[MealLedger]) -> PlanTotals:
    """Sum calories and macros over every entry of every section.

    A missing ledger gives all-zero totals. Values keep full Decimal precision;
    rounding for display is left to the caller.
    """
    if ledger is None:
        return PlanTotals()
    calories = protein = carbs = fats = Decimal(0)
    for entry in ledger.entries():
        calories += entry.calories
        protein += entry.protein
        carbs += entry.carbs
        fats += entry.fats
    return PlanTotals(calories, protein, carbs, fats)


__all__ = ["compute_plan_totals"]
