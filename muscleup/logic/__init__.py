"""Core business logic layer.

Subpackages:
- extraction: vendor text -> MealLedger, text sanitizing
- reporting: plan totals
"""
__all__ = ["extraction", "reporting"]
