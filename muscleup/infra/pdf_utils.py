"""MuscleUp report composition.

Layout happens in two steps: layout_document() places every string, box and
image on a list of Page objects, then render_pages() replays them on a
reportlab canvas. The first step is plain data so pagination can be checked
without reading a PDF back.
"""
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from reportlab.lib.colors import HexColor
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from muscleup.domain.ClientInfo import ClientInfo
from muscleup.domain.FoodEntry import FoodEntry
from muscleup.domain.MealLedger import MealLedger
from muscleup.domain.PlanTotals import PlanTotals
from muscleup.domain.errors import CompositionError
from muscleup.logic.extraction.sanitize import sanitize_text
from muscleup.utilities.constants import (
    ACCENT_COLOR,
    BACKGROUND_COLOR,
    BOTTOM_MARGIN,
    CLIENT_Y,
    COLUMN_HEADING_Y,
    COLUMN_TITLES,
    COLUMN_X,
    FONT_BOLD,
    FONT_REGULAR,
    FOOD_COLUMN_WIDTH,
    HEADER_CURSOR_START,
    HEADING_FONT_SIZE,
    INFO_FONT_SIZE,
    ITEM_ROW_HEIGHT,
    LEFT_MARGIN,
    LOGO_MARGIN,
    LOGO_SIZE,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    REPORT_FILENAME_TEMPLATE,
    ROW_FONT_SIZE,
    SECTION_END_GAP,
    SECTION_HEADING_GAP,
    SUB_LINE_HEIGHT,
    TEXT_COLOR,
    TITLE_FONT_SIZE,
    TITLE_Y,
    TOP_MARGIN,
    TOTALS_COLUMN_X,
    TOTALS_LABEL_Y,
    TOTALS_TITLES,
    TOTALS_VALUE_Y,
    WEIGHT_UNIT,
    WEIGHT_Y,
)

logger = logging.getLogger(__name__)


@dataclass
class TextOp:
    x: float
    y: float
    text: str
    font: str = FONT_REGULAR
    size: float = ROW_FONT_SIZE
    color: str = TEXT_COLOR

    def draw(self, pdf: canvas.Canvas):
        pdf.setFont(self.font, self.size)
        pdf.setFillColor(HexColor(self.color))
        pdf.drawString(self.x, self.y, self.text)


@dataclass
class RectOp:
    x: float
    y: float
    width: float
    height: float
    color: str

    def draw(self, pdf: canvas.Canvas):
        pdf.setFillColor(HexColor(self.color))
        pdf.rect(self.x, self.y, self.width, self.height, stroke=0, fill=1)


@dataclass
class ImageOp:
    path: Path
    x: float
    y: float
    width: float
    height: float

    def draw(self, pdf: canvas.Canvas):
        pdf.drawImage(ImageReader(str(self.path)), self.x, self.y, self.width, self.height,
                      mask='auto', preserveAspectRatio=True)


@dataclass
class Page:
    ops: List[Union[TextOp, RectOp, ImageOp]] = field(default_factory=list)

    def add_text(self, x, y, text, font=FONT_REGULAR, size=ROW_FONT_SIZE, color=TEXT_COLOR):
        # every string reaching a page goes through here
        self.ops.append(TextOp(x, y, sanitize_text(text), font, size, color))

    def texts(self) -> List[str]:
        return [op.text for op in self.ops if isinstance(op, TextOp)]


def wrap_text(text: str, width: float, font: str = FONT_REGULAR, size: float = ROW_FONT_SIZE) -> List[str]:
    """Greedy word wrap: add words to a line until the next one would overflow `width`.

    A single word wider than `width` keeps a line of its own.
    """
    words = text.split()
    if not words:
        return [""]
    lines = []
    current = words[0]
    for word in words[1:]:
        candidate = f"{current} {word}"
        if stringWidth(candidate, font, size) > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    lines.append(current)
    return lines


def report_filename(client: ClientInfo) -> str:
    """`{ClientName}_Diet_Week_{week}.pdf`"""
    name = sanitize_text(client.name).replace("/", "_").replace("\\", "_")
    return REPORT_FILENAME_TEMPLATE.format(name=name, week=sanitize_text(client.week))


def _new_page(pages: List[Page]) -> Page:
    page = Page()
    page.ops.append(RectOp(0, 0, PAGE_WIDTH, PAGE_HEIGHT, BACKGROUND_COLOR))
    pages.append(page)
    return page


def _draw_header(page: Page, client: ClientInfo, totals: PlanTotals, logo_path: Optional[Path]):
    if logo_path is not None:
        page.ops.append(ImageOp(Path(logo_path), PAGE_WIDTH - LOGO_MARGIN - LOGO_SIZE,
                                PAGE_HEIGHT - LOGO_MARGIN - LOGO_SIZE, LOGO_SIZE, LOGO_SIZE))

    page.add_text(LEFT_MARGIN, TITLE_Y, f"MuscleUp Diet Plan - Week {client.week}",
                  FONT_BOLD, TITLE_FONT_SIZE, ACCENT_COLOR)
    page.add_text(LEFT_MARGIN, CLIENT_Y, f"Client: {client.name}", FONT_BOLD, INFO_FONT_SIZE)
    page.add_text(LEFT_MARGIN, WEIGHT_Y, f"Weight: {client.weight} {WEIGHT_UNIT}", FONT_BOLD, INFO_FONT_SIZE)

    shown = totals.formatted()
    for key, title in TOTALS_TITLES.items():
        unit = "kcal" if key == "calories" else "g"
        page.add_text(TOTALS_COLUMN_X[key], TOTALS_LABEL_Y, title, FONT_BOLD, ROW_FONT_SIZE + 2)
        page.add_text(TOTALS_COLUMN_X[key], TOTALS_VALUE_Y, f"{shown[key]} {unit}", size=ROW_FONT_SIZE + 2)

    for key, title in COLUMN_TITLES.items():
        page.add_text(COLUMN_X[key], COLUMN_HEADING_Y, title, FONT_BOLD, ROW_FONT_SIZE + 1, ACCENT_COLOR)
    page.ops.append(RectOp(LEFT_MARGIN, COLUMN_HEADING_Y - 8, PAGE_WIDTH - 2 * LEFT_MARGIN, 1, ACCENT_COLOR))


def _row_advance(food_lines: List[str]) -> float:
    return ITEM_ROW_HEIGHT + (len(food_lines) - 1) * SUB_LINE_HEIGHT


def _draw_entry(page: Page, y: float, entry: FoodEntry, food_lines: List[str]) -> float:
    """Draw one item row at `y` with its wrapped food label; returns the vertical space it used."""
    for index, line in enumerate(food_lines):
        page.add_text(COLUMN_X["food"], y - index * SUB_LINE_HEIGHT, line)
    page.add_text(COLUMN_X["quantity"], y, entry.quantity)
    page.add_text(COLUMN_X["calories"], y, f"{entry.calories:.2f}")
    page.add_text(COLUMN_X["protein"], y, f"{entry.protein:.2f} g")
    page.add_text(COLUMN_X["carbs"], y, f"{entry.carbs:.2f} g")
    page.add_text(COLUMN_X["fats"], y, f"{entry.fats:.2f} g")
    return _row_advance(food_lines)


def layout_document(client: ClientInfo, totals: PlanTotals, ledger: MealLedger,
                    logo_path: Optional[Path] = None) -> List[Page]:
    """Place the report on pages, starting a new page whenever the cursor runs
    below the bottom margin (checked before every heading and every row). A
    row whose wrapped food label would reach below the margin moves to the
    next page as a whole."""
    missing = client.missing_fields()
    if missing:
        raise CompositionError(f"Please enter the client {' and '.join(missing)}.")

    pages: List[Page] = []
    page = _new_page(pages)
    _draw_header(page, client, totals, logo_path)
    y = HEADER_CURSOR_START

    for section, entries in ledger.items():
        if y < BOTTOM_MARGIN:
            page = _new_page(pages)
            y = TOP_MARGIN
        page.add_text(LEFT_MARGIN, y, section, FONT_BOLD, HEADING_FONT_SIZE, ACCENT_COLOR)
        y -= SECTION_HEADING_GAP

        for entry in entries:
            food_lines = wrap_text(sanitize_text(entry.food), FOOD_COLUMN_WIDTH)
            # the last wrapped sub-line must stay above the margin too
            last_line_y = y - (len(food_lines) - 1) * SUB_LINE_HEIGHT
            if y < BOTTOM_MARGIN or last_line_y < BOTTOM_MARGIN:
                page = _new_page(pages)
                y = TOP_MARGIN
            y -= _draw_entry(page, y, entry, food_lines)

        y -= SECTION_END_GAP

    return pages


def render_pages(pages: List[Page]) -> bytes:
    """Replay laid-out pages on a reportlab canvas and return the PDF bytes."""
    buf = io.BytesIO()
    pdf = canvas.Canvas(buf, pagesize=(PAGE_WIDTH, PAGE_HEIGHT))
    try:
        for page in pages:
            for op in page.ops:
                op.draw(pdf)
            pdf.showPage()
        pdf.save()
    except Exception as e:
        logger.exception("Failed to write report pages")
        raise CompositionError(f"There was an error generating the report: {e}") from e
    return buf.getvalue()


def compose_plan_pdf(client: ClientInfo, totals: PlanTotals, ledger: MealLedger,
                     logo_path: Optional[Path] = None) -> bytes:
    """Build the MuscleUp report for `client` and return it as PDF bytes."""
    pages = layout_document(client, totals, ledger, logo_path)
    data = render_pages(pages)
    logger.info(f"Composed report for {client.name}: {len(pages)} page(s), {len(data)} bytes")
    return data


__all__ = ["Page", "TextOp", "RectOp", "ImageOp", "wrap_text", "report_filename",
           "layout_document", "render_pages", "compose_plan_pdf"]
