"""Solidity source parser used by the dependency ordering flow."""

import re
from typing import List, Optional, Tuple

from ...models import ParsedDeclaration, ParsedSourceUnit
from ..shared import logger

DECLARATION_PATTERN = re.compile(
    r'\b(?:(abstract)\s+)?(contract|interface|library|struct|enum)\s+([A-Za-z_]\w*)\s*([^{;]*)\{'
)
IMPORT_PATTERN = re.compile(r'\bimport\s+(?:[^;]*?\bfrom\s+)?["\']([^"\']+)["\'][^;]*;')
IDENTIFIER_PATTERN = re.compile(r'\b[A-Za-z_]\w*\b')
STRING_PATTERN = r'"(?:\\.|[^"\\\n])*"|\'(?:\\.|[^\'\\\n])*\''
# String literals are matched first so comment markers inside them are kept
STRING_OR_COMMENT_PATTERN = re.compile(rf'({STRING_PATTERN})|/\*.*?\*/|//[^\n]*', re.DOTALL)
STRING_LITERAL_PATTERN = re.compile(STRING_PATTERN)


class SolidityCodeParser:
    """Parser for extracting imports and top-level declarations from Solidity code.

    Regex based: it understands enough of the grammar to find the top-level
    contracts, interfaces, libraries, structs and enums of one source file.
    """

    def __init__(self, source_code: str):
        """
        Initialize parser with source code.

        Args:
            source_code: Full Solidity source code of one file
        """
        self.source_code = source_code
        self.cleaned_code = self._remove_comments(source_code)
        self.masked_code = self._mask_strings(self.cleaned_code)

    @staticmethod
    def _remove_comments(text: str) -> str:
        """Remove comments from Solidity code, leaving string literals untouched."""
        return STRING_OR_COMMENT_PATTERN.sub(lambda m: m.group(1) or '', text)

    @staticmethod
    def _mask_strings(text: str) -> str:
        """Blank out the contents of string literals, keeping quotes and offsets."""
        def blank(match: re.Match) -> str:
            literal = match.group(0)
            return literal[0] + ' ' * (len(literal) - 2) + literal[-1]
        return STRING_LITERAL_PATTERN.sub(blank, text)

    @staticmethod
    def _find_matching_brace(text: str, open_index: int) -> Optional[int]:
        depth = 0
        for i in range(open_index, len(text)):
            char = text[i]
            if char == '{':
                depth += 1
            elif char == '}':
                depth -= 1
                if depth == 0:
                    return i
        return None

    @staticmethod
    def _parse_base_contracts(header: str) -> List[str]:
        """Get the names after `is`, dropping constructor arguments."""
        match = re.search(r'\bis\b(.*)', header, re.DOTALL)
        if not match:
            return []
        bases = match.group(1)
        # Strip nested argument lists, innermost first
        previous = None
        while previous != bases:
            previous = bases
            bases = re.sub(r'\([^()]*\)', '', bases)
        names = []
        for part in bases.split(','):
            part = part.strip()
            if part:
                names.append(part.split('.')[-1].strip())
        return names

    def extract_imports(self) -> List[str]:
        """
        Extract the import paths of the file.

        Returns:
            Import paths in source order
        """
        return [match.group(1) for match in IMPORT_PATTERN.finditer(self.cleaned_code)]

    def extract_declarations(self) -> List[ParsedDeclaration]:
        """
        Extract the top-level declarations of the file.

        Returns:
            List of declarations in source order

        Raises:
            ValueError: If a declaration body has no closing brace
        """
        declarations = []
        position = 0

        while True:
            # Braces and keywords inside string literals are not code
            match = DECLARATION_PATTERN.search(self.masked_code, position)
            if not match:
                break

            abstract, kind, name, header = match.groups()
            open_index = match.end() - 1
            close_index = self._find_matching_brace(self.masked_code, open_index)
            if close_index is None:
                raise ValueError(f"Unbalanced braces in {kind} {name}")

            declarations.append(ParsedDeclaration(
                name=name,
                kind='abstract' if abstract else kind,
                base_contracts=self._parse_base_contracts(header) if kind in ('contract', 'interface') else [],
                body=self.masked_code[open_index + 1:close_index],
            ))
            logger.debug(f"Found {kind}: {name}")
            position = close_index + 1

        return declarations

    def parse(self) -> ParsedSourceUnit:
        return ParsedSourceUnit(imports=self.extract_imports(), declarations=self.extract_declarations())


def parse_solidity(source_code: str) -> ParsedSourceUnit:
    """Parse one Solidity file with the regex parser."""
    return SolidityCodeParser(source_code).parse()


def extract_identifiers(text: str) -> Tuple[str, ...]:
    """Distinct identifiers of a code fragment in first-seen order."""
    return tuple(dict.fromkeys(IDENTIFIER_PATTERN.findall(text)))
