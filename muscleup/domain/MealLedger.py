"""MealLedger domain entity: food entries grouped by meal section, in source order."""
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from muscleup.domain.FoodEntry import FoodEntry
from muscleup.utilities.constants import MEAL_SECTIONS


class MealLedger:
    """Immutable mapping section name -> tuple of FoodEntry.

    All sections of MEAL_SECTIONS are always present, empty ones as ().
    """

    def __init__(self, sections: Optional[Mapping[str, Iterable[FoodEntry]]] = None):
        given = dict(sections or {})
        unknown = set(given) - set(MEAL_SECTIONS)
        if unknown:
            raise ValueError(f"Unknown meal section(s): {', '.join(sorted(unknown))}")
        self._sections: Dict[str, Tuple[FoodEntry, ...]] = {
            name: tuple(given.get(name, ())) for name in MEAL_SECTIONS
        }

    def __getitem__(self, section: str) -> Tuple[FoodEntry, ...]:
        return self._sections[section]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __eq__(self, other):
        if not isinstance(other, MealLedger):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        counts = ", ".join(f"{name}={len(items)}" for name, items in self._sections.items())
        return f"MealLedger({counts})"

    def items(self):
        return self._sections.items()

    def entries(self) -> Iterator[FoodEntry]:
        """All entries, section by section, in source order."""
        for items in self._sections.values():
            yield from items

    def entry_count(self) -> int:
        return sum(len(items) for items in self._sections.values())

    def is_empty(self) -> bool:
        return self.entry_count() == 0

    @staticmethod
    def from_dict(data: Mapping[str, Sequence[dict]]):
        return MealLedger({name: [FoodEntry.from_dict(e) for e in entries] for name, entries in data.items()})

    def to_dict(self):
        return {name: [entry.to_dict() for entry in items] for name, items in self._sections.items()}
