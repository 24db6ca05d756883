"""Explorer fetching stages: HTTP call, response normalization, remappings."""

from .mixin import SourceCodeFetchingMixin
from .normalization import SourceCodeShape, classify_source_code, normalize_source_result
from .remappings import apply_remappings, parse_remapping, parse_remappings

__all__ = [
    "SourceCodeFetchingMixin",
    "SourceCodeShape",
    "apply_remappings",
    "classify_source_code",
    "normalize_source_result",
    "parse_remapping",
    "parse_remappings",
]
