from datetime import datetime, timezone

BRAND = "brand"
TYPE = "type"
MODEL = "model"

# Search entries and category output follow this kind order.
ENTITY_KINDS = (BRAND, TYPE, MODEL)

# Snapshot collection key per entity kind.
COLLECTION_KEYS = {
    BRAND: "brands",
    TYPE: "types",
    MODEL: "models",
}

SOURCE_EXTENSIONS = (".json",)
CANONICAL_DIR = "canonical"

INDEX_FILE = "index.json"
CATEGORIES_FILE = "categories.json"
SEARCH_INDEX_FILE = "search-index.json"

# Written in this order.
ARTIFACT_FILES = (INDEX_FILE, CATEGORIES_FILE, SEARCH_INDEX_FILE)

SCHEMA_FILES = {
    INDEX_FILE: "index.schema.json",
    CATEGORIES_FILE: "categories.schema.json",
    SEARCH_INDEX_FILE: "search-index.schema.json",
    BRAND: "brand.schema.json",
    TYPE: "type.schema.json",
    MODEL: "model.schema.json",
}

FALLBACK_TIMESTAMP = datetime(1970, 1, 1, tzinfo=timezone.utc)
