"""Parsing mixin: per-file parse and conversion into the declaration model."""

from typing import List, Optional, Tuple

from ...exceptions import SourceParseError
from ...models import FetchResult, ParsedSourceUnit, SolidityDeclaration
from ..shared import logger
from .converter import convert_unit_to_declarations
from .parser import parse_solidity
from .sorting import topological_sort_declarations
from .version import parse_solidity_version


class SourceCodeParsingMixin:
    # Collaborators, replaceable per instance
    source_parser = staticmethod(parse_solidity)
    declaration_converter = staticmethod(convert_unit_to_declarations)
    declaration_sorter = staticmethod(topological_sort_declarations)
    version_parser = staticmethod(parse_solidity_version)

    def parse_source_code(self, source_code: str, filename: Optional[str] = None,
                          contract_address: Optional[str] = None) -> ParsedSourceUnit:
        """
        Parse Solidity source code.

        Args:
            source_code: Solidity source code
            filename: Filename the code came from, for error reporting
            contract_address: Contract the code belongs to, for error reporting

        Returns:
            Parsed source unit

        Raises:
            SourceParseError: Wrapping the parser failure, with the source code attached
        """
        try:
            return self.source_parser(source_code)
        except Exception as e:
            raise SourceParseError(
                f"Failed to parse solidity code from source code:\n{source_code}",
                source_code=source_code,
                filename=filename,
                contract_address=contract_address,
            ) from e

    def declarations_from_fetch(self, fetched: FetchResult) -> List[SolidityDeclaration]:
        """Parse and convert every fetched file, one after the other in fetch order."""
        declarations: List[SolidityDeclaration] = []
        for file in fetched.files:
            logger.debug(f"Parsing source file {file.filename}")
            unit = self.parse_source_code(file.code, file.filename, fetched.contract_address or None)
            declarations.extend(self.declaration_converter(unit, file.filename, fetched.remappings))
        return declarations

    def get_declarations(self, contract_address: str, filename: Optional[str] = None) -> Tuple[List[SolidityDeclaration], str]:
        """
        Get the declarations of every verified source file of a contract.

        Args:
            contract_address: Contract address with a 0x prefix
            filename: Optional, case-sensitive name of one source file without the .sol extension

        Returns:
            Tuple of (declarations, contract name)
        """
        fetched = self.get_source_code(contract_address, filename)
        declarations = self.declarations_from_fetch(fetched)
        logger.info(f"Found {len(declarations)} declarations in {len(fetched.files)} files for {contract_address}")
        return declarations, fetched.contract_name
