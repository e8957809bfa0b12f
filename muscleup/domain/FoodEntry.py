"""FoodEntry domain entity: one row of a meal section (food, quantity, macros)."""
from decimal import Decimal
from typing import Union

Number = Union[Decimal, int, float, str]

MACRO_FIELDS = ('calories', 'protein', 'carbs', 'fats')


class FoodEntry:
    def __init__(self, food: str = "", quantity: str = "", calories: Number = 0,
                 protein: Number = 0, carbs: Number = 0, fats: Number = 0):
        self.food = food
        self.quantity = quantity
        # str() first so floats keep their printed value instead of binary noise
        self.calories = Decimal(str(calories))
        self.protein = Decimal(str(protein))
        self.carbs = Decimal(str(carbs))
        self.fats = Decimal(str(fats))
        for field in MACRO_FIELDS:
            if getattr(self, field) < 0:
                raise ValueError(f"{field} cannot be negative")

    def __str__(self) -> str:
        return (f"{self.food} - {self.quantity} - {self.calories} kcal - Protein: {self.protein}g, "
                f"Carbs: {self.carbs}g, Fats: {self.fats}g")

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, FoodEntry):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def to_tuple(self):
        return (self.food, self.quantity, self.calories, self.protein, self.carbs, self.fats)

    @staticmethod
    def from_dict(data):
        '''Creates a FoodEntry from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"food", "quantity", *MACRO_FIELDS}
        filtered = {k: v for k, v in d.items() if k in allowed}
        return FoodEntry(**filtered)

    def to_dict(self):
        '''Converts the entry to a JSON-ready dictionary (decimals as strings).'''
        return {
            "food": self.food,
            "quantity": self.quantity,
            "calories": str(self.calories),
            "protein": str(self.protein),
            "carbs": str(self.carbs),
            "fats": str(self.fats),
        }
