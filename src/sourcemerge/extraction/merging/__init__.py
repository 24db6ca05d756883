"""Merging of fetched source files into one Solidity file."""

from .transforms import (
    comment_out_imports,
    comment_out_pragma_solidity,
    prepare_file_for_merge,
    rename_spdx_identifiers,
)
from .workflow import SourceCodeMergingMixin, merge_source_files, order_filenames

__all__ = [
    "SourceCodeMergingMixin",
    "comment_out_imports",
    "comment_out_pragma_solidity",
    "merge_source_files",
    "order_filenames",
    "prepare_file_for_merge",
    "rename_spdx_identifiers",
]
