import unittest

from src.ingestion.application.page_assembler import PageAssembler
from src.ingestion.application.relevance_gate import RelevanceGate
from src.ingestion.application.workflows.ingest_dump import IngestDumpWorkflow, IngestWorkflowConfig
from src.ingestion.domain.topic_filters import HISTORY
from tests.utils.dump_fixtures import page_events


class FakeEventSource:
    def __init__(self, events):
        self._events = list(events)
        self.consumed = 0

    def events(self):
        for event in self._events:
            self.consumed += 1
            yield event

    def close(self):
        pass


def build_workflow(events, max_articles=None, topic_filter=None):
    source = FakeEventSource(events)
    workflow = IngestDumpWorkflow(
        source=source,
        assembler=PageAssembler(RelevanceGate(topic_filter)),
        config=IngestWorkflowConfig(max_articles=max_articles, show_progress=False),
    )
    return workflow, source


class IngestDumpWorkflowTests(unittest.TestCase):
    def test_collects_articles_and_redirects(self):
        events = (
            page_events("World War II", "global war", page_id="32927")
            + page_events("WWII", "#REDIRECT [[World War II]]", redirect="World War II")
            + page_events("File:Example.jpg", "image")
        )
        workflow, _ = build_workflow(events)
        dump = workflow.run()

        self.assertEqual(list(dump.articles), ["World War II"])
        self.assertEqual(dump.redirects, {"WWII": "World War II"})
        self.assertEqual(dump.processed_total, 2)
        self.assertFalse(dump.capped)
        self.assertEqual(workflow.last_summary.articles_total, 1)
        self.assertEqual(workflow.last_summary.redirects_total, 1)

    def test_duplicate_titles_keep_last_occurrence(self):
        events = page_events("Rome", "first") + page_events("Rome", "second")
        workflow, _ = build_workflow(events)
        dump = workflow.run()
        self.assertEqual(dump.articles["Rome"].content, "second")

    def test_cap_stops_reading_early(self):
        events = []
        for i in range(5):
            events += page_events(f"Article {i}", "body", page_id=str(i + 1))
        workflow, source = build_workflow(events, max_articles=2)
        dump = workflow.run()

        self.assertEqual(dump.processed_total, 2)
        self.assertTrue(dump.capped)
        self.assertEqual(list(dump.articles), ["Article 0", "Article 1"])
        self.assertLess(source.consumed, len(events))

    def test_filter_is_applied(self):
        events = (
            page_events("World War II", "global war")
            + page_events("Computer Science", "algorithms")
            + page_events("Roman Empire", "ancient Rome")
        )
        workflow, _ = build_workflow(events, topic_filter=HISTORY)
        dump = workflow.run()
        self.assertEqual(list(dump.articles), ["World War II", "Roman Empire"])

    def test_streaming_hands_articles_over_without_retaining(self):
        events = (
            page_events("Rome", "a")
            + page_events("Roma", "#REDIRECT [[Rome]]", redirect="Rome")
            + page_events("Carthage", "b")
        )
        handled = []
        workflow, _ = build_workflow(events)
        dump = workflow.run(article_handler=handled.append)

        self.assertEqual([p.title for p in handled], ["Rome", "Carthage"])
        self.assertEqual(dump.articles, {})
        self.assertEqual(dump.redirects, {"Roma": "Rome"})
        self.assertEqual(dump.processed_total, 3)
        self.assertEqual(workflow.last_summary.articles_total, 2)

    def test_streaming_respects_cap(self):
        events = []
        for i in range(4):
            events += page_events(f"Article {i}", "body")
        handled = []
        workflow, _ = build_workflow(events, max_articles=3)
        dump = workflow.run(article_handler=handled.append)
        self.assertEqual(len(handled), 3)
        self.assertTrue(dump.capped)


if __name__ == "__main__":
    unittest.main()
