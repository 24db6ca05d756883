"""Compiler version normalization."""

import re

from ...exceptions import CompilerVersionError

VERSION_PATTERN = re.compile(r'v?(\d+\.\d+\.\d+)')


def parse_solidity_version(compiler_version: str) -> str:
    """
    Get the semantic version out of an explorer compiler version.

    For example "v0.8.19+commit.7dd6d404" gives "0.8.19".
    """
    match = VERSION_PATTERN.search(compiler_version or '')
    if not match:
        raise CompilerVersionError(f"Failed to parse compiler version {compiler_version!r}", compiler_version)
    return match.group(1)
