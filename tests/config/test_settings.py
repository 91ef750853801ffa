import os
import unittest
from pathlib import Path
from unittest.mock import patch

from src.config.settings import DEFAULT_LANGUAGE, GeneratorSettings, settings_from_env


class SettingsFromEnvTests(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = settings_from_env()
        self.assertEqual(settings.language, DEFAULT_LANGUAGE)
        self.assertIsNone(settings.max_articles)
        self.assertIsNone(settings.topic_filter)
        self.assertIsNone(settings.article_limit)
        self.assertFalse(settings.streaming)

    @patch.dict(
        os.environ,
        {
            "STATICMCP_INPUT": "dumps/enwiki.xml.bz2",
            "STATICMCP_OUTPUT": "site",
            "STATICMCP_LANGUAGE": "fr",
            "STATICMCP_MAX_ARTICLES": "500",
            "STATICMCP_TOPIC_FILTER": "history",
            "STATICMCP_ARTICLE_LIMIT": "100",
            "STATICMCP_STREAMING": "true",
        },
        clear=True,
    )
    def test_reads_environment(self):
        settings = settings_from_env()
        self.assertEqual(
            settings,
            GeneratorSettings(
                input_path=Path("dumps/enwiki.xml.bz2"),
                output_path=Path("site"),
                language="fr",
                max_articles=500,
                topic_filter="history",
                article_limit=100,
                streaming=True,
            ),
        )

    @patch.dict(os.environ, {"STATICMCP_MAX_ARTICLES": "many"}, clear=True)
    def test_invalid_integer_names_the_variable(self):
        with self.assertRaises(ValueError) as ctx:
            settings_from_env()
        self.assertIn("STATICMCP_MAX_ARTICLES", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
