import unittest

from src.generation.application.article_writer import CollisionResolvingArticleWriter, sibling_key
from src.generation.domain.collision_policy import WriteAction

LONG_CONTENT = "This is a long historical war article about ancient battles. " + "a" * 1400
OTHER_LONG_CONTENT = "Another long article about a different empire. " + "b" * 1400


class FakeArtifactStore:
    def __init__(self):
        self.items = {}
        self.put_calls = []

    def get(self, key):
        return self.items.get(key)

    def put(self, key, text):
        self.put_calls.append(key)
        self.items[key] = text


class ArticleWriterTests(unittest.TestCase):
    def setUp(self):
        self.store = FakeArtifactStore()
        self.writer = CollisionResolvingArticleWriter(self.store)

    def test_sibling_key(self):
        self.assertEqual(sibling_key("battle_article", 2), "battle_article.2")

    def test_no_collision(self):
        self.assertIs(self.writer.write("Hello World", "Greeting."), WriteAction.CREATED)
        self.assertEqual(self.store.items, {"hello_world": "# Hello World\n\nGreeting."})

    def test_short_collision_is_merged(self):
        self.writer.write("War Article", "A short war article.")
        action = self.writer.write("War/Article", "Another short war article.")

        self.assertIs(action, WriteAction.MERGED)
        text = self.store.items["war_article"]
        self.assertIn("War Article", text)
        self.assertIn("War/Article", text)
        self.assertIn("---", text)
        self.assertNotIn("Multiple articles found", text)
        self.assertEqual(list(self.store.items), ["war_article"])

    def test_long_collision_creates_index_and_siblings(self):
        self.writer.write("Battle Article", LONG_CONTENT)
        action = self.writer.write("Battle/Article", OTHER_LONG_CONTENT)

        self.assertIs(action, WriteAction.ESCALATED)
        index = self.store.items["battle_article"]
        self.assertTrue(index.startswith("Multiple articles found"))
        self.assertIn("Use get_article tool with title 'Battle Article'", index)
        self.assertIn("Use get_article tool with title 'Battle/Article'", index)
        self.assertIn("ancient battles", self.store.items["battle_article.1"])
        self.assertIn("different empire", self.store.items["battle_article.2"])
        self.assertNotIn("---", self.store.items["battle_article.1"])
        self.assertNotIn("---", self.store.items["battle_article.2"])

    def test_third_title_extends_index(self):
        self.writer.write("Empire Article", LONG_CONTENT)
        self.writer.write("Empire/Article", OTHER_LONG_CONTENT)
        action = self.writer.write("Empire_Article", "A third one.")

        self.assertIs(action, WriteAction.INDEX_EXTENDED)
        index = self.store.items["empire_article"]
        self.assertEqual(index.count("• **"), 3)
        self.assertEqual(self.store.items["empire_article.3"], "# Empire_Article\n\nA third one.")

    def test_mixed_lengths_escalate(self):
        self.writer.write("Mixed Article", "Short one.")
        action = self.writer.write("Mixed/Article", LONG_CONTENT)

        self.assertIs(action, WriteAction.ESCALATED)
        self.assertEqual(self.store.items["mixed_article.1"], "# Mixed Article\n\nShort one.")
        self.assertIn("ancient battles", self.store.items["mixed_article.2"])

    def test_merge_then_escalate_keeps_every_title(self):
        self.writer.write("Siege Article", "one")
        self.writer.write("Siege/Article", "two")
        self.writer.write("Siege_Article", LONG_CONTENT)

        self.assertEqual(self.store.items["siege_article.1"], "# Siege Article\n\none")
        self.assertEqual(self.store.items["siege_article.2"], "# Siege/Article\n\ntwo")
        self.assertIn("ancient battles", self.store.items["siege_article.3"])

    def test_escalation_keeps_title_whose_stem_looks_numbered(self):
        self.writer.write("Apollo 1", "Apollo 1 was a failed mission.")
        self.writer.write("Apollo", "Alpha long body. " + LONG_CONTENT)
        self.writer.write("APOLLO", "Beta long body. " + OTHER_LONG_CONTENT)

        self.assertEqual(self.store.items["apollo_1"], "# Apollo 1\n\nApollo 1 was a failed mission.")
        self.assertTrue(self.store.items["apollo"].startswith("Multiple articles found"))
        self.assertIn("Alpha long body", self.store.items["apollo.1"])
        self.assertIn("Beta long body", self.store.items["apollo.2"])

    def test_sibling_rewrite_leaves_numbered_title_alone(self):
        self.writer.write("Apollo", "Alpha long body. " + LONG_CONTENT)
        self.writer.write("APOLLO", "Beta long body. " + OTHER_LONG_CONTENT)
        self.writer.write("Apollo 1", "First. " + LONG_CONTENT)
        self.writer.write("Apollo 1", "Second. " + OTHER_LONG_CONTENT)
        action = self.writer.write("Apollo", "Rewritten body.")

        self.assertIs(action, WriteAction.REPLACED)
        self.assertEqual(self.store.items["apollo.1"], "# Apollo\n\nRewritten body.")
        self.assertTrue(self.store.items["apollo_1"].startswith("# Apollo 1\n\nSecond."))
        self.assertTrue(self.store.items["apollo"].startswith("Multiple articles found"))

    def test_sibling_keys_never_match_encoded_titles(self):
        for key in ("apollo", "a" * 200):
            sibling = sibling_key(key, 1)
            self.assertNotRegex(sibling, r"^[a-z0-9_-]*$")

    def test_action_counts(self):
        self.writer.write("A", "x")
        self.writer.write("a", "y")
        self.writer.write("B", "z")
        self.assertEqual(self.writer.action_counts["created"], 2)
        self.assertEqual(self.writer.action_counts["merged"], 1)


if __name__ == "__main__":
    unittest.main()
