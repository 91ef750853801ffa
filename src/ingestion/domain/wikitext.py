import re
from dataclasses import dataclass
from typing import Pattern


@dataclass(frozen=True)
class RewriteRule:
    rule_id: str
    pattern: Pattern[str]
    replacement: str


# Order matters: link collapsing assumes category/file links are already gone,
# tag stripping assumes ref/nowiki bodies were removed with their contents.
WIKITEXT_REWRITES: tuple[RewriteRule, ...] = (
    RewriteRule("template", re.compile(r"\{\{[^}]*\}\}"), ""),
    RewriteRule("category_link", re.compile(r"\[\[Category:[^\]]*\]\]"), ""),
    RewriteRule("file_link", re.compile(r"\[\[(?:File|Image):[^\]]*\]\]"), ""),
    RewriteRule("piped_link", re.compile(r"\[\[[^\]]*\|([^\]]*)\]\]"), r"\1"),
    RewriteRule("plain_link", re.compile(r"\[\[([^\]]*)\]\]"), r"\1"),
    RewriteRule("bold", re.compile(r"'''([^']*?)'''"), r"\1"),
    RewriteRule("italic", re.compile(r"''([^']*?)''"), r"\1"),
    RewriteRule("ref_block", re.compile(r"<ref[^>]*>[^<]*</ref>"), ""),
    RewriteRule("nowiki_block", re.compile(r"<nowiki>[^<]*</nowiki>"), ""),
    RewriteRule("markup_tag", re.compile(r"<[^>]*>"), ""),
    RewriteRule("heading", re.compile(r"={2,6}([^=]*?)={2,6}"), r"\1"),
)


def clean_wikitext(content: str) -> str:
    """Heuristic wikitext -> plain text pass.

    Not a parser: nested templates or unbalanced markup can leave residue.
    The result never contains blank lines.
    """
    cleaned = content or ""
    for rule in WIKITEXT_REWRITES:
        cleaned = rule.pattern.sub(rule.replacement, cleaned)
    lines = (line.strip() for line in cleaned.splitlines())
    return "\n".join(line for line in lines if line)
