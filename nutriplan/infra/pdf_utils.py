import io
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from nutriplan.domain.WeekPlan import WeekPlan

HEADER_COLOR = colors.HexColor("#10b981")


def _pdf_text(value) -> str:
    """The built-in PDF fonts only cover Latin-1; drop anything else (emoji suffixes)."""
    return str(value).encode("latin-1", "ignore").decode("latin-1").strip()


def _fmt(number) -> str:
    return f"{number:g}" if isinstance(number, (int, float)) else str(number)


def _table_style():
    return TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (0, 0), (-1, -1), "LEFT"),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 11),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ])


def generate_pdf_for_week(plan: WeekPlan) -> bytes:
    """Print-friendly meal plan: one table per day (type / meal / kcal / P-C-F / prep / ingredients)."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(escape(_pdf_text(plan.title) or "Meal Plan"), styles["Title"]),
        Spacer(1, 12),
    ]

    for day in plan.days:
        t = day.total_macros
        elements.append(Paragraph(
            escape(_pdf_text(f"{day.day} - {_fmt(t.calories)} kcal "
                             f"(P {_fmt(t.protein)}g / C {_fmt(t.carbs)}g / F {_fmt(t.fats)}g)")),
            styles["Heading2"],
        ))
        data = [["Type", "Meal", "kcal", "P / C / F (g)", "Prep", "Ingredients"]]
        for meal in day.meals:
            m = meal.macros
            ingredients = ", ".join(f"{i.item} ({i.amount})" for i in meal.ingredients)
            data.append([
                _pdf_text(meal.type),
                Paragraph(escape(_pdf_text(meal.name)), styles["BodyText"]),
                _fmt(meal.calories),
                f"{_fmt(m.protein)} / {_fmt(m.carbs)} / {_fmt(m.fats)}",
                _pdf_text(meal.prep_time),
                Paragraph(escape(_pdf_text(ingredients)), styles["BodyText"]),
            ])
        table = Table(data, repeatRows=1, colWidths=[70, 170, 45, 85, 60, 370])
        table.setStyle(_table_style())
        elements.append(table)
        elements.append(Spacer(1, 14))

    doc.build(elements)
    return buf.getvalue()


def generate_pdf_for_shopping_list(plan: WeekPlan, shopping_list: dict) -> bytes:
    """Printable shopping list with an empty box per line; takes build_shopping_list() output."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(escape(_pdf_text(f"Shopping List - {plan.title}")), styles["Title"]),
        Spacer(1, 12),
    ]

    for category in shopping_list["categories"]:
        elements.append(Paragraph(
            escape(_pdf_text(f"{category['label']} ({category['count']})")), styles["Heading2"]))
        data = [["", "Item", "Amount", "Used for"]]
        for line in category["items"]:
            data.append([
                "[x]" if line["checked"] else "[ ]",
                Paragraph(escape(_pdf_text(line["name"])), styles["BodyText"]),
                Paragraph(escape(_pdf_text(line["amount_display"])), styles["BodyText"]),
                Paragraph(escape(_pdf_text(line["used_for"])), styles["BodyText"]),
            ])
        table = Table(data, repeatRows=1, colWidths=[30, 150, 120, 250])
        table.setStyle(_table_style())
        elements.append(table)
        elements.append(Spacer(1, 12))

    if not shopping_list["categories"]:
        elements.append(Paragraph("Nothing to buy.", styles["BodyText"]))

    doc.build(elements)
    return buf.getvalue()
