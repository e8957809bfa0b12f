"""Text cleanup applied to everything placed on a report page."""
from muscleup.utilities.constants import LIGATURES

_LIGATURE_TABLE = str.maketrans(LIGATURES)


def sanitize_text(value) -> str:
    """Replace ligature glyphs (e.g. U+FB02) with their plain letters."""
    if value is None:
        return ""
    return str(value).translate(_LIGATURE_TABLE)


__all__ = ["sanitize_text"]
