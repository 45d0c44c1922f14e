"""Tests for PDF export."""

import re
from datetime import date

from fitness_coach.agents import fallback_plan
from fitness_coach.models import DietMeal, FitnessPlan
from fitness_coach.services.pdf_export import pdf_safe, render_plan_pdf


def page_count(content: bytes) -> int:
    return max(int(n) for n in re.findall(rb"/Count (\d+)", content))


class TestPdfSafe:
    """Tests for pdf_safe."""

    def test_drops_emoji(self):
        assert pdf_safe("Keep pushing! 💪") == "Keep pushing!"

    def test_keeps_latin_text(self):
        assert pdf_safe("Café au lait") == "Café au lait"

    def test_other_scripts_marked(self):
        """Characters the fonts cannot draw are shown, not silently removed."""
        assert pdf_safe("Приседания 3x10") == "?????????? 3x10"
        assert pdf_safe("Squats 💪\ufe0f") == "Squats"


class TestRenderPlanPdf:
    """Tests for render_plan_pdf."""

    def test_renders_pdf(self, sample_plan_dict):
        content = render_plan_pdf(FitnessPlan.from_dict(sample_plan_dict), generated_on=date(2024, 1, 1))

        assert content.startswith(b"%PDF")
        assert content.rstrip().endswith(b"%%EOF")

    def test_long_plan_spans_pages(self):
        """A plan longer than a page is paginated instead of clipped."""
        plan = fallback_plan()
        plan.diet_plan += [DietMeal(f"Extra meal {i}", ["Rice"] * 6, "300") for i in range(20)]

        assert page_count(render_plan_pdf(plan)) > 1
