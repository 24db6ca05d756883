"""Text transforms applied to each file before it is concatenated."""

import re

# String literals and comments are matched first and left as they are
SKIP_PATTERN = r'(?P<skip>"(?:\\.|[^"\\\n])*"|\'(?:\\.|[^\'\\\n])*\'|/\*.*?\*/|//[^\n]*)'
PRAGMA_SOLIDITY_PATTERN = re.compile(
    rf'{SKIP_PATTERN}|(?P<lead>^|\s)(?P<statement>pragma\s+solidity\b[^;]*;)',
    re.MULTILINE | re.DOTALL,
)
# Whitespace before import and characters after import up to ;
# across multiple lines
IMPORT_PATTERN = re.compile(
    rf'{SKIP_PATTERN}|^(?P<lead>\s*?)(?P<statement>import\b.*?;)',
    re.MULTILINE | re.DOTALL,
)
SPDX_PATTERN = re.compile(r'SPDX-(?!-)')


def _comment_out_statement(match: re.Match) -> str:
    if match.group('skip'):
        return match.group(0)
    return f"{match.group('lead')}/* {match.group('statement')} */"


def comment_out_pragma_solidity(code: str) -> str:
    """
    Comment out `pragma solidity` statements as the merged file sets its own.

    Pragmas already inside a comment or a string literal are left alone.
    """
    return PRAGMA_SOLIDITY_PATTERN.sub(_comment_out_statement, code)


def comment_out_imports(code: str) -> str:
    """
    Comment out import statements, multi-line import clauses included.

    Imports already inside a comment are left alone, so block comments are
    never nested. Known limitation: a `;` inside a string literal of an
    import ends the match early.
    """
    return IMPORT_PATTERN.sub(_comment_out_statement, code)


def rename_spdx_identifiers(code: str) -> str:
    """Rename SPDX-License-Identifier to SPDX--License-Identifier so the merged file compiles."""
    return SPDX_PATTERN.sub('SPDX--', code)


def prepare_file_for_merge(code: str) -> str:
    return rename_spdx_identifiers(comment_out_imports(comment_out_pragma_solidity(code)))
