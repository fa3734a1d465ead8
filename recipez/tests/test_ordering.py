from recipez.domain.GroceryItem import GroceryItem
from recipez.logic.grocery.ordering import display_order


def _names(items):
    return [i.name for i in items]


def test_checked_items_move_to_end_stably():
    items = [
        GroceryItem(1, "A"),
        GroceryItem(2, "B", checked=True),
        GroceryItem(3, "C"),
    ]
    assert _names(display_order(items)) == ["A", "C", "B"]


def test_manual_order_survives_partition():
    # stored order after a drag-reorder: ids no longer ascending
    items = [
        GroceryItem(5, "Eggs", checked=True),
        GroceryItem(2, "Bread"),
        GroceryItem(9, "Milk", checked=True),
        GroceryItem(1, "Apples"),
    ]
    assert _names(display_order(items)) == ["Bread", "Apples", "Eggs", "Milk"]


def test_search_filters_and_orders_by_id():
    items = [
        GroceryItem(5, "Green pepper"),
        GroceryItem(2, "Black Pepper", checked=True),
        GroceryItem(9, "Red pepper"),
        GroceryItem(1, "Pepperoni", checked=True),
        GroceryItem(3, "Salt"),
    ]
    result = display_order(items, "PEPPER")
    assert [i.id for i in result] == [5, 9, 1, 2]


def test_blank_search_behaves_like_no_search():
    items = [GroceryItem(3, "C"), GroceryItem(1, "A")]
    assert _names(display_order(items, "   ")) == ["C", "A"]


def test_display_order_does_not_mutate_input():
    items = [GroceryItem(1, "A", checked=True), GroceryItem(2, "B")]
    display_order(items)
    assert _names(items) == ["A", "B"]
