class CategoryIndex:
    """category name -> member titles in processing order.

    Membership is idempotent: an article that is categorized again when it is
    rewritten is not listed twice.
    """

    def __init__(self) -> None:
        self._members: dict[str, list[str]] = {}
        self._seen: dict[str, set[str]] = {}

    def add(self, category: str, title: str) -> None:
        seen = self._seen.setdefault(category, set())
        if title in seen:
            return
        seen.add(title)
        self._members.setdefault(category, []).append(title)

    def add_all(self, categories: list[str], title: str) -> None:
        for category in categories:
            self.add(category, title)

    def names(self) -> list[str]:
        return list(self._members)

    def members(self, category: str) -> list[str]:
        return list(self._members.get(category, []))

    def items(self) -> list[tuple[str, list[str]]]:
        return [(name, list(titles)) for name, titles in self._members.items()]

    def __len__(self) -> int:
        return len(self._members)
