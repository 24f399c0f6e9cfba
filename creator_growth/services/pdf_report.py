"""Eight-page A4 growth report drawn directly on a reportlab canvas."""

from __future__ import annotations

import base64
import io
import logging

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from creator_growth.core.config import settings
from creator_growth.schemas.analysis import AnalysisResult

logger = logging.getLogger(__name__)

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 50
CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN
BRAND = colors.Color(0.05, 0.65, 0.42)
INK = colors.Color(0.15, 0.15, 0.18)
MUTED = colors.Color(0.4, 0.4, 0.45)
PAGE_COUNT = 8


class DocumentRenderFailed(RuntimeError):
    def __init__(self, message: str, *, code: str = "document_render_failed"):
        super().__init__(message)
        self.code = code


def wrap_text(text: str, font_name: str, font_size: float, max_width: float) -> list[str]:
    lines: list[str] = []
    for paragraph in (text or "").splitlines() or [""]:
        lines.extend(simpleSplit(paragraph, font_name, font_size, max_width) or [""])
    return lines


class _ReportWriter:
    def __init__(self, pdf: canvas.Canvas):
        self.pdf = pdf
        self.y = PAGE_HEIGHT - MARGIN

    def heading(self, title: str) -> None:
        self.pdf.setFillColor(BRAND)
        self.pdf.rect(0, PAGE_HEIGHT - 90, PAGE_WIDTH, 90, fill=1, stroke=0)
        self.pdf.setFillColor(colors.white)
        self.pdf.setFont("Helvetica-Bold", 24)
        self.pdf.drawString(MARGIN, PAGE_HEIGHT - 58, title)
        self.y = PAGE_HEIGHT - 130

    def subheading(self, title: str) -> None:
        self.y -= 8
        self.pdf.setFillColor(BRAND)
        self.pdf.setFont("Helvetica-Bold", 14)
        self.pdf.drawString(MARGIN, self.y, title)
        self.y -= 22

    def paragraph(self, text: str, *, bullet: str = "", size: float = 11, indent: float = 0) -> None:
        self.pdf.setFillColor(INK)
        self.pdf.setFont("Helvetica", size)
        prefix = f"{bullet} " if bullet else ""
        lines = wrap_text(prefix + text, "Helvetica", size, CONTENT_WIDTH - indent)
        for line in lines:
            if self.y < MARGIN + 20:
                return
            self.pdf.drawString(MARGIN + indent, self.y, line)
            self.y -= size + 5
        self.y -= 4

    def footer(self, page_number: int) -> None:
        self.pdf.setFont("Helvetica", 8)
        self.pdf.setFillColor(MUTED)
        self.pdf.drawString(MARGIN, 24, "FameChase.com | Creator Growth Kit")
        self.pdf.drawRightString(PAGE_WIDTH - MARGIN, 24, f"Page {page_number} of {PAGE_COUNT}")

    def finish_page(self, page_number: int) -> None:
        self.footer(page_number)
        self.pdf.showPage()
        self.y = PAGE_HEIGHT - MARGIN


def _cover(w: _ReportWriter, result: AnalysisResult) -> None:
    pdf = w.pdf
    pdf.setFillColor(BRAND)
    pdf.rect(0, 0, PAGE_WIDTH, PAGE_HEIGHT, fill=1, stroke=0)
    pdf.setFillColor(colors.white)
    pdf.rect(40, PAGE_HEIGHT - 400, PAGE_WIDTH - 80, 350, fill=1, stroke=0)

    pdf.setFillColor(BRAND)
    pdf.setFont("Helvetica-Bold", 36)
    pdf.drawString(60, PAGE_HEIGHT - 120, "CREATOR GROWTH KIT")
    pdf.setFillColor(INK)
    pdf.setFont("Helvetica", 16)
    pdf.drawString(60, PAGE_HEIGHT - 160, "AI-Powered Market Analysis & Growth Strategy")
    pdf.setFont("Helvetica", 11)
    pdf.setFillColor(MUTED)
    pdf.drawString(60, PAGE_HEIGHT - 220, f"Generated: {result.generated_at.isoformat()}")
    pdf.drawString(60, PAGE_HEIGHT - 240, f"Agent ID: {result.agent_id[:20]}...")
    pdf.drawString(60, PAGE_HEIGHT - 260, f"Fame Score: {result.analysis.fame_score}/100")

    pdf.setFillColor(colors.white)
    pdf.setFont("Helvetica-Bold", 20)
    pdf.drawString(60, 80, "FameChase.com")


def _executive_summary(w: _ReportWriter, result: AnalysisResult) -> None:
    w.heading("EXECUTIVE SUMMARY")
    w.subheading("Your Fame Score")
    w.pdf.setFillColor(BRAND)
    w.pdf.setFont("Helvetica-Bold", 40)
    w.pdf.drawString(MARGIN, w.y - 20, f"{result.analysis.fame_score}/100")
    w.y -= 60
    w.subheading("Market Position")
    w.paragraph(result.analysis.market_position)
    w.subheading("Key Insights")
    for insight in result.analysis.key_insights[:5]:
        w.paragraph(insight, bullet="*")


def _market_trends(w: _ReportWriter, result: AnalysisResult) -> None:
    w.heading("MARKET TRENDS & ANALYSIS")
    w.subheading("Current Market Trends")
    for trend in result.market_research.trends[:6]:
        w.paragraph(trend, bullet="->")
    w.subheading("Industry Insights")
    for insight in result.market_research.industry_insights[:5]:
        w.paragraph(insight, bullet="*")


def _competitive_advantage(w: _ReportWriter, result: AnalysisResult) -> None:
    w.heading("COMPETITIVE ADVANTAGE")
    w.subheading("Your Unique Position")
    w.paragraph(result.analysis.competitive_advantage)
    w.subheading("Market Leaders to Study")
    for competitor in result.market_research.competitor_analysis.top_competitors[:5]:
        w.paragraph(competitor.name, size=12)
        w.paragraph(
            f"{competitor.followers:,} followers | {competitor.avg_engagement}% engagement | "
            f"{competitor.monetization_strategy}",
            size=10,
            indent=12,
        )


def _monetization_roadmap(w: _ReportWriter, result: AnalysisResult) -> None:
    w.heading("MONETIZATION ROADMAP")
    w.subheading("Recommended Strategy")
    w.paragraph(result.analysis.monetization_strategy)
    w.subheading("Revenue Opportunities")
    for opportunity in result.market_research.monetization_opportunities[:5]:
        w.paragraph(opportunity.type, size=12)
        w.paragraph(f"Estimated: {opportunity.estimated_earnings}", size=10, indent=12)
        if opportunity.requirements:
            w.paragraph(f"Requirements: {', '.join(opportunity.requirements)}", size=10, indent=12)


def _growth_plan(w: _ReportWriter, result: AnalysisResult) -> None:
    w.heading("GROWTH PLAN")
    for title, items in (
        ("Next 30 Days", result.growth_plan.next_month),
        ("Next 90 Days", result.growth_plan.next_quarter),
        ("Next 12 Months", result.growth_plan.next_year),
    ):
        w.subheading(title)
        for item in items:
            w.paragraph(item, bullet="[ ]")


def _recommendations(w: _ReportWriter, result: AnalysisResult) -> None:
    w.heading("PERSONALIZED RECOMMENDATIONS")
    for recommendation in result.analysis.recommendations[:10]:
        w.paragraph(recommendation, bullet="->")
    w.subheading("Trend Analysis")
    w.paragraph(result.analysis.trend_analysis)


def _media_kit_preview(w: _ReportWriter, result: AnalysisResult) -> None:
    w.heading("MEDIA KIT PREVIEW")
    w.subheading("Creator Snapshot")
    w.paragraph(f"Fame Score: {result.analysis.fame_score}/100")
    w.paragraph(result.analysis.market_position)
    w.subheading("What Brands Get")
    for line in result.analysis.key_insights[:3]:
        w.paragraph(line, bullet="*")
    w.subheading("Work With Me")
    w.paragraph(f"Partnership enquiries: {settings.contact_email}")


_PAGES = (
    _cover,
    _executive_summary,
    _market_trends,
    _competitive_advantage,
    _monetization_roadmap,
    _growth_plan,
    _recommendations,
    _media_kit_preview,
)


def render_analysis_pdf(result: AnalysisResult) -> bytes:
    buffer = io.BytesIO()
    try:
        pdf = canvas.Canvas(buffer, pagesize=A4)
        pdf.setTitle("Creator Growth Kit")
        pdf.setAuthor("FameChase")
        writer = _ReportWriter(pdf)
        for page_number, draw in enumerate(_PAGES, start=1):
            draw(writer, result)
            writer.finish_page(page_number)
        pdf.save()
    except Exception as exc:  # noqa: BLE001 - reportlab raises assorted errors on bad input
        logger.warning("pdf_render_failed agent_id=%s: %s", result.agent_id, exc)
        raise DocumentRenderFailed(f"Could not render report: {exc}") from exc
    return buffer.getvalue()


def to_data_url(document: bytes) -> str:
    return "data:application/pdf;base64," + base64.b64encode(document).decode("ascii")
