import io
from datetime import date
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from recipez.logic.grocery.ordering import display_order
from recipez.utilities.constants import APP_NAME, EXPORT_DATE_FORMAT


def generate_pdf_for_grocery_list(items):
    """Generate a printable PDF table: Item / Amount / Status, in display order."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Grocery List – {date.today().strftime(EXPORT_DATE_FORMAT)}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Item", "Amount", "Status"]]
    for item in display_order(items):
        data.append([
            item.name,
            f"{item.amount} {item.unit}".strip(),
            "Got it" if item.checked else "To buy",
        ])
    if len(data) == 1:
        data.append(["(empty)", "", ""])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (1,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    elements.append(Spacer(1, 12))
    elements.append(Paragraph(f"Generated by {APP_NAME}", styles["Normal"]))
    doc.build(elements)
    return buf.getvalue()
