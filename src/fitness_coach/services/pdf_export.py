"""PDF export of a fitness plan."""

import unicodedata
from datetime import date
from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from ..models.plan import FitnessPlan

APP_TITLE = "AI Fitness Coach"
FOOTER_TEXT = "Generated by AI Fitness Coach"

MARGIN = 15 * mm
FOOTER_RESERVE = 15 * mm

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
FONT_ITALIC = "Helvetica-Oblique"
FONT_BOLD_ITALIC = "Helvetica-BoldOblique"


def pdf_safe(text: str) -> str:
    """Make text drawable with the built-in PDF fonts.

    Emoji and other pictographs are dropped; any other character outside
    cp1252 is shown as "?".
    """
    text = "".join(ch for ch in text if not _pictograph(ch) or _encodable(ch))
    return text.encode("cp1252", "replace").decode("cp1252").strip()


def _pictograph(ch: str) -> bool:
    if unicodedata.category(ch) in ("So", "Cf"):
        return True
    return "VARIATION SELECTOR" in unicodedata.name(ch, "")


def _encodable(ch: str) -> bool:
    try:
        ch.encode("cp1252")
    except UnicodeEncodeError:
        return False
    return True


class _NumberedCanvas(canvas.Canvas):
    """Canvas that defers page output so footers can show the page total."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._page_states: list[dict] = []

    def showPage(self):
        self._page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        total = len(self._page_states)
        for state in self._page_states:
            self.__dict__.update(state)
            self._draw_footer(total)
            super().showPage()
        super().save()

    def _draw_footer(self, total: int):
        width, _ = self._pagesize
        self.setFont(FONT, 8)
        self.drawCentredString(width / 2, 10 * mm, f"Page {self._pageNumber} of {total}")
        self.drawRightString(width - MARGIN, 10 * mm, FOOTER_TEXT)


class PlanPdfWriter:
    """Lays a plan out top to bottom, breaking pages as needed.

    ``y`` is the distance from the top edge of the page.
    """

    def __init__(self, buffer: BytesIO, pagesize=A4):
        self.canvas = _NumberedCanvas(buffer, pagesize=pagesize)
        self.page_width, self.page_height = pagesize
        self.max_width = self.page_width - 2 * MARGIN
        self.y = MARGIN
        self.font = FONT
        self.font_size = 12

    def set_font(self, font: str, size: float):
        self.font = font
        self.font_size = size
        self.canvas.setFont(font, size)

    def new_page(self):
        self.canvas.showPage()
        self.canvas.setFont(self.font, self.font_size)
        self.y = MARGIN

    def ensure_space(self, needed: float = 25 * mm):
        if self.y > self.page_height - needed - FOOTER_RESERVE:
            self.new_page()

    def text(self, text: str, indent: float = 0, line_height: float = 7 * mm, width: float | None = None):
        """Draw wrapped text, adding pages when the bottom is reached."""
        width = (width if width is not None else self.max_width) - indent
        for line in simpleSplit(pdf_safe(text), self.font, self.font_size, width):
            if self.y > self.page_height - MARGIN - FOOTER_RESERVE:
                self.new_page()
            self.canvas.drawString(MARGIN + indent, self.page_height - self.y, line)
            self.y += line_height

    def gap(self, amount: float):
        self.y += amount

    def finish(self):
        self.canvas.showPage()
        self.canvas.save()


def render_plan_pdf(plan: FitnessPlan, generated_on: date | None = None) -> bytes:
    """Render a plan to PDF bytes."""
    generated_on = generated_on or date.today()
    buffer = BytesIO()
    pdf = PlanPdfWriter(buffer)
    pdf.canvas.setTitle(f"{plan.user_data.name} - Fitness Plan")
    pdf.canvas.setAuthor(APP_TITLE)

    # Header
    pdf.set_font(FONT_BOLD, 24)
    pdf.text(APP_TITLE)
    pdf.set_font(FONT_BOLD, 16)
    pdf.gap(5 * mm)
    pdf.text("Your Personalized Fitness Plan")
    pdf.gap(10 * mm)

    pdf.set_font(FONT, 12)
    pdf.text(f"Name: {plan.user_data.name}")
    pdf.text(f"Goal: {plan.user_data.fitness_goal}")
    pdf.text(f"Date: {generated_on.isoformat()}")
    pdf.gap(10 * mm)

    # Workouts
    pdf.ensure_space(30 * mm)
    pdf.set_font(FONT_BOLD, 18)
    pdf.text("Workout Plan")
    pdf.gap(5 * mm)

    for day in plan.workout_plan:
        pdf.ensure_space(40 * mm)
        pdf.set_font(FONT_BOLD, 12)
        pdf.text(day.day)
        pdf.gap(2 * mm)

        pdf.set_font(FONT, 10)
        for i, exercise in enumerate(day.exercises, start=1):
            pdf.ensure_space(20 * mm)
            pdf.text(f"{i}. {exercise.name}", indent=5 * mm)
            details = f"   {exercise.sets} sets x {exercise.reps} reps"
            if exercise.rest:
                details += f" | Rest: {exercise.rest}"
            pdf.text(details, indent=5 * mm)
            pdf.gap(2 * mm)
        pdf.gap(5 * mm)

    # Diet
    pdf.ensure_space(30 * mm)
    pdf.set_font(FONT_BOLD, 18)
    pdf.text("Diet Plan")
    pdf.gap(5 * mm)

    for meal in plan.diet_plan:
        pdf.ensure_space(30 * mm)
        pdf.set_font(FONT_BOLD, 12)
        pdf.text(meal.meal)
        if meal.calories:
            pdf.set_font(FONT_ITALIC, 9)
            pdf.text(f"(~{meal.calories} calories)")
        pdf.gap(2 * mm)

        pdf.set_font(FONT, 10)
        for item in meal.items:
            pdf.ensure_space(15 * mm)
            pdf.text(f"  - {item}", indent=5 * mm, line_height=6 * mm)
        pdf.gap(5 * mm)

    # Tips
    pdf.ensure_space(30 * mm)
    pdf.set_font(FONT_BOLD, 18)
    pdf.text("Tips for Success")
    pdf.gap(5 * mm)

    pdf.set_font(FONT, 10)
    for i, tip in enumerate(plan.tips, start=1):
        pdf.ensure_space(20 * mm)
        pdf.text(f"{i}. {tip}", line_height=6 * mm, width=pdf.max_width - 10 * mm)
        pdf.gap(3 * mm)

    if plan.motivation:
        pdf.ensure_space(25 * mm)
        pdf.gap(5 * mm)
        pdf.set_font(FONT_BOLD_ITALIC, 14)
        pdf.text(f'"{pdf_safe(plan.motivation)}"', line_height=8 * mm)

    pdf.finish()
    return buffer.getvalue()
