from typing import Final

# Meal sections, in report order
BREAKFAST: Final[str] = "Breakfast"
LUNCH: Final[str] = "Lunch"
SNACKS: Final[str] = "Snacks"
DINNER: Final[str] = "Dinner"
MEAL_SECTIONS: Final[tuple[str, ...]] = (BREAKFAST, LUNCH, SNACKS, DINNER)

# Line parsing
HEADER_PREFIXES: Final[tuple[str, ...]] = ("Food",)
HEADER_KEYWORD: Final[str] = "Calories"
COLUMN_SEPARATOR_PATTERN: Final[str] = r" {2,}"
MIN_COLUMNS: Final[int] = 6
CALORIE_SUFFIXES: Final[tuple[str, ...]] = ("kcal", "kcl", "cal")

# Glyphs the upstream text conversion emits instead of plain letters
LIGATURES: Final[dict[str, str]] = {
    "\ufb00": "ff",
    "\ufb01": "fi",
    "\ufb02": "fl",
    "\ufb03": "ffi",
    "\ufb04": "ffl",
}

# Page geometry (points, origin bottom-left, A4)
PAGE_WIDTH: Final[float] = 595.27
PAGE_HEIGHT: Final[float] = 841.89
LEFT_MARGIN: Final[float] = 40
TOP_MARGIN: Final[float] = 790
BOTTOM_MARGIN: Final[float] = 60
HEADER_CURSOR_START: Final[float] = 560

LOGO_SIZE: Final[float] = 90
LOGO_MARGIN: Final[float] = 30

ITEM_ROW_HEIGHT: Final[float] = 20
SUB_LINE_HEIGHT: Final[float] = 12
SECTION_HEADING_GAP: Final[float] = 25
SECTION_END_GAP: Final[float] = 15
FOOD_COLUMN_WIDTH: Final[float] = 170

# x positions of the item table columns
COLUMN_X: Final[dict[str, float]] = {
    "food": 40,
    "quantity": 220,
    "calories": 300,
    "protein": 380,
    "carbs": 450,
    "fats": 520,
}
COLUMN_TITLES: Final[dict[str, str]] = {
    "food": "Food",
    "quantity": "Quantity",
    "calories": "Calories",
    "protein": "Protein",
    "carbs": "Carbs",
    "fats": "Fats",
}

# Fonts and colours
FONT_REGULAR: Final[str] = "Helvetica"
FONT_BOLD: Final[str] = "Helvetica-Bold"
TITLE_FONT_SIZE: Final[float] = 22
INFO_FONT_SIZE: Final[float] = 14
HEADING_FONT_SIZE: Final[float] = 16
ROW_FONT_SIZE: Final[float] = 10
BACKGROUND_COLOR: Final[str] = "#F5F5F5"
ACCENT_COLOR: Final[str] = "#1E90FF"
TEXT_COLOR: Final[str] = "#000000"

WEIGHT_UNIT: Final[str] = "lbs"
DEFAULT_WEEK: Final[str] = "1"
REPORT_FILENAME_TEMPLATE: Final[str] = "{name}_Diet_Week_{week}.pdf"
PDF_MAGIC: Final[bytes] = b"%PDF"

# First-page header block
TITLE_Y: Final[float] = 780
CLIENT_Y: Final[float] = 740
WEIGHT_Y: Final[float] = 715
TOTALS_LABEL_Y: Final[float] = 680
TOTALS_VALUE_Y: Final[float] = 662
COLUMN_HEADING_Y: Final[float] = 600
TOTALS_COLUMN_X: Final[dict[str, float]] = {
    "calories": 40,
    "protein": 200,
    "carbs": 320,
    "fats": 440,
}
TOTALS_TITLES: Final[dict[str, str]] = {
    "calories": "Total Calories",
    "protein": "Protein",
    "carbs": "Carbs",
    "fats": "Fats",
}
