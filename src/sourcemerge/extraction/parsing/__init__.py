"""Default parser, converter, sorter and version normalizer for merging."""

from .converter import convert_unit_to_declarations, resolve_import_path
from .mixin import SourceCodeParsingMixin
from .parser import SolidityCodeParser, parse_solidity
from .sorting import topological_sort_declarations
from .version import parse_solidity_version

__all__ = [
    "SolidityCodeParser",
    "SourceCodeParsingMixin",
    "convert_unit_to_declarations",
    "parse_solidity",
    "parse_solidity_version",
    "resolve_import_path",
    "topological_sort_declarations",
]
