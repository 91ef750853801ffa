import re
import unittest

from src.generation.domain.categorizer import CategoryRule, KeywordCategorizer, NoCategorizer
from src.generation.domain.category_index import CategoryIndex


class CategorizerTests(unittest.TestCase):
    def test_no_categorizer_returns_nothing(self):
        self.assertEqual(NoCategorizer().categorize("World War II", "global war"), [])

    def test_keyword_categorizer_default_rules(self):
        categorizer = KeywordCategorizer()
        self.assertEqual(categorizer.categorize("Battle of Hastings", "A medieval battle."), ["war", "medieval"])
        self.assertIn("empire", categorizer.categorize("Rome", "The Roman Empire ruled."))
        self.assertIn("person", categorizer.categorize("Joan of Arc", "Joan of Arc (1412 – 1431) was a leader."))
        self.assertEqual(categorizer.categorize("Lemon", "A fruit."), [])

    def test_title_rules_ignore_content(self):
        self.assertNotIn("war", KeywordCategorizer().categorize("Peace", "after the war"))

    def test_custom_rules_do_not_repeat_categories(self):
        rules = (
            CategoryRule("topic", "title", re.compile("a")),
            CategoryRule("topic", "content", re.compile("b")),
        )
        self.assertEqual(KeywordCategorizer(rules).categorize("a", "b"), ["topic"])


class CategoryIndexTests(unittest.TestCase):
    def test_membership_is_ordered_and_deduplicated(self):
        index = CategoryIndex()
        index.add_all(["war", "medieval"], "Hastings")
        index.add("war", "Agincourt")
        index.add("war", "Hastings")

        self.assertEqual(index.names(), ["war", "medieval"])
        self.assertEqual(index.members("war"), ["Hastings", "Agincourt"])
        self.assertEqual(index.members("missing"), [])
        self.assertEqual(len(index), 2)
        self.assertEqual(index.items()[1], ("medieval", ["Hastings"]))


if __name__ == "__main__":
    unittest.main()
