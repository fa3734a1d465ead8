from datetime import date
from recipez.domain.GroceryItem import GroceryItem
from recipez.infra.pdf_utils import generate_pdf_for_grocery_list
from recipez.logic.grocery.export import format_grocery_text


def test_text_export_sections():
    items = [
        GroceryItem(1, "Milk", "1", "gal"),
        GroceryItem(2, "Bread", checked=True),
        GroceryItem(3, "Salt", "1", ""),
    ]
    text = format_grocery_text(items, today=date(2025, 3, 4))
    assert text == (
        "🛒 Grocery List\n"
        "====================\n"
        "\n"
        "📝 To Buy:\n"
        "• Milk (1 gal)\n"
        "• Salt\n"
        "\n"
        "✅ Already Got:\n"
        "• Bread\n"
        "\n"
        "Generated by Recip-EZ on 3/4/2025"
    )


def test_text_export_to_buy_only_keeps_extra_blank_line():
    text = format_grocery_text([GroceryItem(1, "Eggs", "12", "pcs")], today=date(2025, 11, 20))
    assert text.endswith("📝 To Buy:\n• Eggs (12 pcs)\n\n\nGenerated by Recip-EZ on 11/20/2025")


def test_text_export_omits_empty_sections():
    text = format_grocery_text([], today=date(2025, 3, 4))
    assert "To Buy:" not in text
    assert "Already Got:" not in text
    assert text == "🛒 Grocery List\n====================\n\n\nGenerated by Recip-EZ on 3/4/2025"


def test_pdf_export_is_a_pdf():
    pdf = generate_pdf_for_grocery_list([GroceryItem(1, "Milk", "1", "gal"), GroceryItem(2, "Eggs", checked=True)])
    assert pdf.startswith(b"%PDF")
    assert generate_pdf_for_grocery_list([]).startswith(b"%PDF")
