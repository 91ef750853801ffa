import hashlib
import unicodedata

from pathvalidate import sanitize_filename as lib_sanitize

MAX_FILENAME_LENGTH = 200
HASH_HEX_WIDTH = 16
# "_" + 16 hex chars
HASH_SUFFIX_WIDTH = HASH_HEX_WIDTH + 1

# Non-article namespaces are never ingested, whatever the topic filter says.
EXCLUDED_TITLE_PREFIXES: tuple[str, ...] = (
    "File:",
    "Category:",
    "Template:",
    "User:",
    "Talk:",
    "Wikipedia:",
    "Help:",
    "Portal:",
    "MediaWiki:",
    "Module:",
)

SUPPORTED_DUMP_SUFFIXES: tuple[str, ...] = (".xml", ".bz2")


def is_namespaced_title(title: str) -> bool:
    return any(title.startswith(prefix) for prefix in EXCLUDED_TITLE_PREFIXES)


def strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def make_filename_safe(text: str) -> str:
    out = []
    for c in text.lower():
        if ("a" <= c <= "z") or ("0" <= c <= "9") or c in "-_":
            out.append(c)
        else:
            # spaces and everything else fold to "_"
            out.append("_")
    return "".join(out)


def title_hash(title: str) -> str:
    digest = hashlib.blake2b(title.encode("utf-8"), digest_size=HASH_HEX_WIDTH // 2)
    return digest.hexdigest()


def encode_filename(title: str) -> str:
    """Map an article title to a filesystem-safe stem of at most 200 chars.

    The mapping is lossy: titles that differ only by characters folded to
    "_" ("A/B", "A B", "A_B") share a stem. Overlong stems are truncated and
    suffixed with a hash of the original title.
    """
    safe = make_filename_safe(strip_accents(title))
    if len(safe) <= MAX_FILENAME_LENGTH:
        return safe
    prefix = safe[: MAX_FILENAME_LENGTH - HASH_SUFFIX_WIDTH]
    return f"{prefix}_{title_hash(title)}"


def sanitize_filename(name: str) -> str:
    """Readable filename for names that are not article titles (e.g. categories)."""
    safe_name = lib_sanitize(name, replacement_text="_")
    if not safe_name:
        return "untitled"
    return safe_name
