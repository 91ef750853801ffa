import re
from dataclasses import dataclass
from typing import Pattern


@dataclass(frozen=True)
class CategoryRule:
    category: str
    source: str  # "title", "content" or "combined"
    pattern: Pattern[str]


# Ready-made rule table; callers with their own taxonomy pass a different one.
DEFAULT_CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("war", "title", re.compile(r"\b(war|wars|battle|siege)\b", re.I)),
    CategoryRule("empire", "combined", re.compile(r"\b(empire|dynasty|kingdom)\b", re.I)),
    CategoryRule("revolution", "title", re.compile(r"\b(revolution|rebellion|uprising)\b", re.I)),
    CategoryRule("ancient", "combined", re.compile(r"\b(ancient|antiquity|bronze age)\b", re.I)),
    CategoryRule("medieval", "combined", re.compile(r"\b(medieval|middle ages|crusades?)\b", re.I)),
    CategoryRule("person", "content", re.compile(r"\(\s*(born|c\.)?\s*\d{3,4}\s*[–-]\s*\d{3,4}\s*\)", re.I)),
    CategoryRule("computing", "combined", re.compile(r"\b(computer|software|programming|algorithm)s?\b", re.I)),
    CategoryRule("mathematics", "combined", re.compile(r"\b(theorem|algebra|geometry|calculus)\b", re.I)),
)


class NoCategorizer:
    def categorize(self, title: str, content: str) -> list[str]:
        return []


class KeywordCategorizer:
    def __init__(self, rules: tuple[CategoryRule, ...] = DEFAULT_CATEGORY_RULES) -> None:
        self.rules = rules

    def categorize(self, title: str, content: str) -> list[str]:
        categories: list[str] = []
        for rule in self.rules:
            if rule.category in categories:
                continue
            if self._rule_matches(rule, title or "", content or ""):
                categories.append(rule.category)
        return categories

    @staticmethod
    def _rule_matches(rule: CategoryRule, title: str, content: str) -> bool:
        if rule.source == "title":
            return bool(rule.pattern.search(title))
        if rule.source == "content":
            return bool(rule.pattern.search(content))
        return bool(rule.pattern.search(f"{title}\n{content}"))
