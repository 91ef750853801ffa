from src.config.logger_config import logger
from src.generation.application.ports import ArtifactStorePort
from src.generation.domain.collision_policy import WriteAction, plan_write
from src.ingestion.domain.rules import encode_filename


# encode_filename only emits [a-z0-9_-], so a "." suffix cannot name a real title.
SIBLING_SEPARATOR = "."


def sibling_key(key: str, ordinal: int) -> str:
    return f"{key}{SIBLING_SEPARATOR}{ordinal}"


class CollisionResolvingArticleWriter:
    """Persists one artifact per encoded filename without losing any title.

    Every write is read-modify-write against the store, so writes for the
    same filename must be issued by a single writer in processing order.
    """

    def __init__(self, store: ArtifactStorePort) -> None:
        self.store = store
        self.action_counts: dict[str, int] = {action.value: 0 for action in WriteAction}

    def write(self, title: str, content: str) -> WriteAction:
        key = encode_filename(title)
        plan = plan_write(self.store.get(key), title, content)
        if plan.base_text is not None:
            self.store.put(key, plan.base_text)
        for ordinal, text in sorted(plan.siblings.items()):
            self.store.put(sibling_key(key, ordinal), text)

        self.action_counts[plan.action.value] += 1
        if plan.action is WriteAction.ESCALATED:
            logger.info(
                "Filename collision escalated to disambiguation index: key={}, title={}, siblings={}",
                key,
                title,
                len(plan.siblings),
            )
        elif plan.action is not WriteAction.CREATED:
            logger.debug("Filename collision resolved: key={}, title={}, action={}", key, title, plan.action.value)
        return plan.action
