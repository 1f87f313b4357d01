from .categories import build_categories
from .clock import ClockResolver, GitHistory
from .integrity import validate_dataset
from .normalizer import normalize
from .pipeline import BuildOptions, BuildResult, build_catalog, derive_artifacts
from .search_index import build_search_entries, build_search_index
from .source_loader import load_snapshot, load_sources

__all__ = [
    "BuildOptions",
    "BuildResult",
    "ClockResolver",
    "GitHistory",
    "build_catalog",
    "build_categories",
    "build_search_entries",
    "build_search_index",
    "derive_artifacts",
    "load_snapshot",
    "load_sources",
    "normalize",
    "validate_dataset",
]
