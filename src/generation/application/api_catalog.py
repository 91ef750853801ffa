from src.generation.application.contracts import Manifest, Resource, ServerInfo, Tool

PROTOCOL_VERSION = "2024-11-05"
SERVER_VERSION = "1.0.0"
JSON_MIME_TYPE = "application/json"

STATS_URI = "wikipedia://stats"
ARTICLES_URI = "wikipedia://articles"

ARTICLES_PER_PAGE = 50
STATS_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"

MANIFEST_PATH = "mcp.json"
STATS_PATH = "resources/stats.json"
ARTICLES_PATH = "resources/articles.json"
ARTICLE_DIR = "tools/get_article"
LIST_ARTICLES_DIR = "tools/list_articles"
LIST_ARTICLES_PATH = "tools/list_articles.json"
LIST_CATEGORIES_PATH = "tools/list_categories.json"
CATEGORY_DIR = "tools/categories"

OUTPUT_DIRS: tuple[str, ...] = ("resources", ARTICLE_DIR, LIST_ARTICLES_DIR, CATEGORY_DIR)

RESOURCES: tuple[Resource, ...] = (
    Resource(
        uri=STATS_URI,
        name="Wikipedia Statistics",
        description="Statistics about the Wikipedia dump",
        mime_type=JSON_MIME_TYPE,
    ),
    Resource(
        uri=ARTICLES_URI,
        name="Article List",
        description="List of all available Wikipedia articles",
        mime_type=JSON_MIME_TYPE,
    ),
)

TOOLS: tuple[Tool, ...] = (
    Tool(
        name="get_article",
        description="Get the full content of a specific Wikipedia article",
        input_schema={
            "type": "object",
            "properties": {"title": {"type": "string", "description": "Article title"}},
            "required": ["title"],
        },
    ),
    Tool(
        name="list_articles",
        description="List available Wikipedia articles with pagination",
        input_schema={
            "type": "object",
            "properties": {
                "page": {
                    "type": "integer",
                    "description": "Page number (1-based, default: 1)",
                    "minimum": 1,
                }
            },
            "required": [],
        },
    ),
    Tool(
        name="list_categories",
        description="List available article categories",
        input_schema={"type": "object", "properties": {}, "required": []},
    ),
    Tool(
        name="categories",
        description="Get articles from a specific category",
        input_schema={
            "type": "object",
            "properties": {"category": {"type": "string", "description": "Category name"}},
            "required": ["category"],
        },
    ),
)


def default_server_name(language: str) -> str:
    return f"Wikipedia {language.upper()} StaticMCP"


def build_manifest(server_name: str) -> Manifest:
    return Manifest(
        protocol_version=PROTOCOL_VERSION,
        server_info=ServerInfo(name=server_name, version=SERVER_VERSION),
        resources=RESOURCES,
        tools=TOOLS,
    )


def total_pages(item_count: int, per_page: int = ARTICLES_PER_PAGE) -> int:
    return (item_count + per_page - 1) // per_page
