from xml.sax.saxutils import escape, quoteattr

from src.ingestion.domain.models import DumpEvent

EXPORT_NS = "http://www.mediawiki.org/xml/export-0.11/"


def page_xml(title: str, text: str, page_id: int | str = 1, redirect: str | None = None) -> str:
    redirect_xml = f"    <redirect title={quoteattr(redirect)} />\n" if redirect is not None else ""
    return (
        "  <page>\n"
        f"    <title>{escape(title)}</title>\n"
        "    <ns>0</ns>\n"
        f"    <id>{page_id}</id>\n"
        f"{redirect_xml}"
        "    <revision>\n"
        "      <id>900001</id>\n"
        "      <contributor><username>Editor</username><id>77</id></contributor>\n"
        f"      <text xml:space=\"preserve\">{escape(text)}</text>\n"
        "    </revision>\n"
        "  </page>\n"
    )


def mediawiki(*pages: str, namespaced: bool = False) -> str:
    ns_attr = f' xmlns="{EXPORT_NS}"' if namespaced else ""
    return f"<mediawiki{ns_attr}>\n{''.join(pages)}</mediawiki>\n"


def page_events(title: str, text: str, page_id: str = "1", redirect: str | None = None) -> list[DumpEvent]:
    events = [
        DumpEvent.start("page"),
        DumpEvent.start("title"),
        DumpEvent.text_run("title", title),
        DumpEvent.end("title"),
        DumpEvent.start("id"),
        DumpEvent.text_run("id", page_id),
        DumpEvent.end("id"),
    ]
    if redirect is not None:
        events += [DumpEvent.start("redirect", {"title": redirect}), DumpEvent.end("redirect")]
    events += [
        DumpEvent.start("revision"),
        DumpEvent.start("id"),
        DumpEvent.text_run("id", "900001"),
        DumpEvent.end("id"),
        DumpEvent.start("text"),
        DumpEvent.text_run("text", text),
        DumpEvent.end("text"),
        DumpEvent.end("revision"),
        DumpEvent.end("page"),
    ]
    return events
