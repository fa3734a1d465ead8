import unittest
from recipez.domain.GroceryItem import GroceryItem
from recipez.domain.GroceryList import GroceryList
from recipez.domain.Ingredient import Ingredient
from recipez.domain.errors import NotFoundError, ValidationError


class TestGroceryListIngest(unittest.TestCase):

    def setUp(self):
        self.grocery_list = GroceryList()

    def test_ingest_assigns_increasing_ids(self):
        added, updated = self.grocery_list.ingest([
            Ingredient("Flour", "2", "cups"),
            Ingredient("Sugar", "1", "cup"),
            Ingredient("Eggs", "3", "pcs"),
        ])
        self.assertEqual([i.id for i in added], [1, 2, 3])
        self.assertEqual(updated, [])
        self.assertTrue(all(not i.checked for i in self.grocery_list.get_items()))
        self.assertTrue(all(i.added_at for i in self.grocery_list.get_items()))

    def test_same_name_different_case_in_one_batch(self):
        self.grocery_list.ingest([
            Ingredient("Milk", "1", "gal"),
            Ingredient("milk", "", ""),
        ])
        items = self.grocery_list.get_items()
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].name, "Milk")
        self.assertEqual(items[0].amount, "1")
        self.assertEqual(items[0].unit, "gal")

    def test_bare_name_does_not_blank_quantity(self):
        self.grocery_list.ingest([Ingredient("Flour", "2", "cups")])
        self.grocery_list.ingest([Ingredient("flour")])
        self.grocery_list.ingest([Ingredient("FLOUR", "3", "")])
        item = self.grocery_list.get(1)
        self.assertEqual((item.amount, item.unit), ("2", "cups"))

    def test_full_quantity_overwrites_but_keeps_name_and_checked(self):
        self.grocery_list.ingest([Ingredient("Flour", "2", "cups")])
        self.grocery_list.toggle(1)
        added, updated = self.grocery_list.ingest([Ingredient("FLOUR", "1", "kg")])
        item = self.grocery_list.get(1)
        self.assertEqual(added, [])
        self.assertEqual(updated, [item])
        self.assertEqual(item.name, "Flour")
        self.assertEqual((item.amount, item.unit), ("1", "kg"))
        self.assertTrue(item.checked)

    def test_size_grows_by_new_names_only(self):
        self.grocery_list.ingest([Ingredient("Salt"), Ingredient("Pepper")])
        self.grocery_list.ingest([Ingredient("salt"), Ingredient("Basil"), Ingredient("PEPPER"), Ingredient("Oregano")])
        self.assertEqual(len(self.grocery_list), 4)
        ids = [i.id for i in self.grocery_list.get_items()]
        self.assertEqual(len(ids), len(set(ids)))

    def test_first_match_wins_with_existing_duplicates(self):
        grocery_list = GroceryList([
            GroceryItem(1, "Egg", "2", "pcs"),
            GroceryItem(2, "egg", "6", "pcs"),
        ])
        grocery_list.ingest([Ingredient("EGG", "12", "pcs")])
        self.assertEqual(grocery_list.get(1).amount, "12")
        self.assertEqual(grocery_list.get(2).amount, "6")

    def test_ids_continue_from_max_not_length(self):
        grocery_list = GroceryList([GroceryItem(7, "Rice")])
        added, _ = grocery_list.ingest([Ingredient("Beans")])
        self.assertEqual(added[0].id, 8)

    def test_whitespace_is_part_of_identity(self):
        self.grocery_list.ingest([Ingredient("Milk"), Ingredient(" milk")])
        self.assertEqual(len(self.grocery_list), 2)


class TestGroceryListMutations(unittest.TestCase):

    def setUp(self):
        self.grocery_list = GroceryList([
            GroceryItem(1, "Apples", "3", "pcs"),
            GroceryItem(2, "Bread", checked=True),
            GroceryItem(3, "Cheese", "200", "g"),
            GroceryItem(4, "Dill", checked=True),
        ])

    def test_toggle_flips_and_sets(self):
        self.assertTrue(self.grocery_list.toggle(1).checked)
        self.assertFalse(self.grocery_list.toggle(1).checked)
        self.assertTrue(self.grocery_list.toggle(2, True).checked)
        self.assertFalse(self.grocery_list.toggle(2, False).checked)

    def test_toggle_unknown_id(self):
        with self.assertRaises(NotFoundError):
            self.grocery_list.toggle(99)

    def test_remove(self):
        removed = self.grocery_list.remove(3)
        self.assertEqual(removed.name, "Cheese")
        self.assertEqual([i.id for i in self.grocery_list.get_items()], [1, 2, 4])
        with self.assertRaises(NotFoundError):
            self.grocery_list.remove(3)

    def test_remove_checked(self):
        self.assertEqual(self.grocery_list.remove_checked(), 2)
        self.assertTrue(all(not i.checked for i in self.grocery_list.get_items()))
        self.assertEqual(self.grocery_list.remove_checked(), 0)

    def test_remove_checked_on_empty_list(self):
        self.assertEqual(GroceryList().remove_checked(), 0)

    def test_clear_restarts_ids(self):
        self.grocery_list.clear()
        self.grocery_list.clear()
        added, _ = self.grocery_list.ingest([Ingredient("Butter")])
        self.assertEqual(added[0].id, 1)

    def test_reorder_full_permutation(self):
        items = self.grocery_list.reorder([4, 2, 1, 3])
        self.assertEqual([i.id for i in items], [4, 2, 1, 3])

    def test_reorder_rejects_partial_duplicate_and_unknown(self):
        for ids in ([1, 2, 3], [1, 2, 3, 4, 5], [1, 1, 2, 3, 4], [1, 2, 3, 3]):
            with self.assertRaises(ValidationError):
                self.grocery_list.reorder(ids)
        self.assertEqual([i.id for i in self.grocery_list.get_items()], [1, 2, 3, 4])

    def test_round_trip_through_dicts(self):
        restored = GroceryList.from_dict(self.grocery_list.to_dict())
        self.assertEqual(restored.to_dict(), self.grocery_list.to_dict())
