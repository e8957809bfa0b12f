"""PlanTotals value object: whole-plan sums of calories and macros."""
from decimal import Decimal


class PlanTotals:
    def __init__(self, calories=Decimal(0), protein=Decimal(0), carbs=Decimal(0), fats=Decimal(0)):
        self.calories = Decimal(calories)
        self.protein = Decimal(protein)
        self.carbs = Decimal(carbs)
        self.fats = Decimal(fats)

    def __eq__(self, other):
        if not isinstance(other, PlanTotals):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __repr__(self) -> str:
        return (f"PlanTotals(calories={self.calories}, protein={self.protein}, "
                f"carbs={self.carbs}, fats={self.fats})")

    def to_tuple(self):
        return (self.calories, self.protein, self.carbs, self.fats)

    def formatted(self):
        """Two-decimal display strings, as printed on the report."""
        return {
            "calories": f"{self.calories:.2f}",
            "protein": f"{self.protein:.2f}",
            "carbs": f"{self.carbs:.2f}",
            "fats": f"{self.fats:.2f}",
        }

    def to_dict(self):
        return {
            "calories": str(self.calories),
            "protein": str(self.protein),
            "carbs": str(self.carbs),
            "fats": str(self.fats),
        }
