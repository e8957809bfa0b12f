"""ClientInfo domain entity: user-entered name, weight and plan week."""
from muscleup.utilities.constants import DEFAULT_WEEK


class ClientInfo:
    def __init__(self, name: str = "", weight="", week: str = ""):
        self.name = (name or "").strip()
        self.weight = str(weight if weight is not None else "").strip()
        self.week = str(week if week is not None else "").strip() or DEFAULT_WEEK

    def __repr__(self) -> str:
        return f"ClientInfo(name={self.name!r}, weight={self.weight!r}, week={self.week!r})"

    def missing_fields(self):
        '''Names of required fields that are still empty.'''
        return [field for field in ("name", "weight") if not getattr(self, field)]

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ClientInfo(d.get("name", ""), d.get("weight", ""), d.get("week", ""))

    def to_dict(self):
        return {"name": self.name, "weight": self.weight, "week": self.week}
