"""PDF sales reports using ReportLab."""

from __future__ import annotations

from pathlib import Path

from .analytics import (
    average_order_value,
    format_currency,
    format_currency_compact,
    format_date,
    format_time,
    stock_status,
)
from .dashboard import Dashboard

_FONT = "Helvetica"
_FONT_BOLD = "Helvetica-Bold"


def _table_style(header_color: str):
    from reportlab.lib import colors
    from reportlab.platypus import TableStyle

    return TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(header_color)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), _FONT_BOLD),
        ("FONTNAME", (0, 1), (-1, -1), _FONT),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("ALIGN", (0, 0), (-1, -1), "LEFT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F5F5F5")]),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
        ("LEFTPADDING", (0, 0), (-1, -1), 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 4),
    ])


def generate_report(
    dashboard: Dashboard,
    output_path: str | Path,
    currency_symbol: str = "$",
) -> Path:
    """Generate a one-page sales report from a dashboard snapshot.

    Args:
        dashboard: Snapshot produced by ``build_dashboard``.
        output_path: Where to save the PDF file.
        currency_symbol: Prefix for money amounts.

    Returns:
        Path to the generated PDF file.

    Raises:
        ImportError: If reportlab is not installed.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
        )
    except ImportError:
        raise ImportError(
            "reportlab is required for PDF reports: pip install 'frispy-pos[pdf]'"
        )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title="Sales report",
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle", parent=styles["Title"], fontName=_FONT_BOLD,
        fontSize=18, leading=24,
    )
    subtitle_style = ParagraphStyle(
        "ReportSubtitle", parent=styles["Normal"], fontName=_FONT,
        fontSize=10, leading=14, textColor=colors.grey,
    )
    heading_style = ParagraphStyle(
        "ReportHeading", parent=styles["Heading2"], fontName=_FONT_BOLD,
        fontSize=13, leading=18, spaceBefore=4 * mm, spaceAfter=2 * mm,
    )
    body_style = ParagraphStyle(
        "ReportBody", parent=styles["Normal"], fontName=_FONT,
        fontSize=9, leading=13,
    )

    def money(amount: float) -> str:
        return format_currency(amount, currency_symbol)

    generated = dashboard.generated_at
    elements: list = [
        Paragraph("Sales report", title_style),
        Paragraph(
            f"{format_date(generated)} {format_time(generated)}", subtitle_style
        ),
        Spacer(1, 4 * mm),
    ]

    # Window totals
    elements.append(Paragraph("Summary", heading_style))
    summary_rows = [["Period", "Orders", "Revenue", "Avg order"]]
    for label, window in (
        ("Today", dashboard.daily),
        ("Last 7 days", dashboard.weekly),
        ("This month", dashboard.monthly),
    ):
        summary_rows.append([
            label,
            str(window.count),
            format_currency_compact(window.total, currency_symbol),
            money(average_order_value(window)),
        ])
    t = Table(summary_rows, colWidths=[45 * mm, 30 * mm, 40 * mm, 40 * mm])
    t.setStyle(_table_style("#4A90D9"))
    elements.append(t)

    # Best sellers
    elements.append(Paragraph("Best sellers", heading_style))
    if dashboard.best_sellers:
        rows = [["#", "Item", "Units", "Revenue"]]
        for rank, entry in enumerate(dashboard.best_sellers, 1):
            rows.append([str(rank), entry.name, str(entry.quantity), money(entry.revenue)])
        t = Table(rows, colWidths=[10 * mm, 80 * mm, 25 * mm, 40 * mm])
        t.setStyle(_table_style("#4A90D9"))
        elements.append(t)
    else:
        elements.append(Paragraph("No sales recorded.", body_style))

    # Daily series
    if dashboard.weekly_chart:
        elements.append(Paragraph("Daily sales", heading_style))
        rows = [["Date", "Orders", "Revenue"]]
        for day in dashboard.weekly_chart:
            rows.append([day.date, str(day.count), money(day.total)])
        t = Table(rows, colWidths=[45 * mm, 30 * mm, 40 * mm])
        t.setStyle(_table_style("#4A90D9"))
        elements.append(t)

    # Low stock
    if dashboard.low_stock:
        elements.append(Paragraph("Low stock", heading_style))
        rows = [["Item", "On hand", "Minimum", "Supplier", "Status"]]
        for item in dashboard.low_stock:
            rows.append([
                item.name,
                f"{item.quantity} {item.unit}",
                f"{item.min_quantity} {item.unit}",
                item.supplier,
                stock_status(item).value,
            ])
        t = Table(rows, colWidths=[45 * mm, 25 * mm, 25 * mm, 45 * mm, 20 * mm])
        t.setStyle(_table_style("#E67E22"))
        elements.append(t)

    doc.build(elements)
    return output_path
