from bas_atlas.constants.catalog import (
    ARTIFACT_FILES,
    BRAND,
    CANONICAL_DIR,
    CATEGORIES_FILE,
    COLLECTION_KEYS,
    ENTITY_KINDS,
    FALLBACK_TIMESTAMP,
    INDEX_FILE,
    MODEL,
    SCHEMA_FILES,
    SEARCH_INDEX_FILE,
    SOURCE_EXTENSIONS,
    TYPE,
)

__all__ = [
    "ARTIFACT_FILES",
    "BRAND",
    "CANONICAL_DIR",
    "CATEGORIES_FILE",
    "COLLECTION_KEYS",
    "ENTITY_KINDS",
    "FALLBACK_TIMESTAMP",
    "INDEX_FILE",
    "MODEL",
    "SCHEMA_FILES",
    "SEARCH_INDEX_FILE",
    "SOURCE_EXTENSIONS",
    "TYPE",
]
