"""Merge workflow: concatenate fetched files into one compilable blob."""

from typing import Callable, Iterable, List, Optional

from ...exceptions import CompilerVersionError, MissingFileForOrderingError
from ...models import MergeResult, SourceFile
from ..parsing.version import parse_solidity_version
from ..shared import logger
from .transforms import prepare_file_for_merge


def order_filenames(files: List[SourceFile], ordered_filenames: Iterable[str]) -> List[str]:
    """
    Combine the dependency order with files it does not mention.

    Files missing from the order come first, in fetch order, so every
    fetched file is output exactly once.
    """
    dependent_filenames = list(dict.fromkeys(ordered_filenames))
    dependent_set = set(dependent_filenames)
    non_dependent_filenames = [f.filename for f in files if f.filename not in dependent_set]
    if non_dependent_filenames:
        logger.warning(f"Failed to find dependencies to files: {non_dependent_filenames}")
    return non_dependent_filenames + dependent_filenames


def merge_source_files(
    files: List[SourceFile],
    ordered_filenames: Iterable[str],
    compiler_version: str,
    contract_name: str = "",
    version_parser: Callable[[str], str] = parse_solidity_version,
    contract_address: Optional[str] = None,
) -> MergeResult:
    """
    Merge source files into one long string of Solidity code.

    Args:
        files: Fetched source files
        ordered_filenames: Filenames with dependencies before dependents, duplicates allowed
        compiler_version: Explorer compiler version, e.g. "v0.8.19+commit.7dd6d404"
        contract_name: Contract name to return with the code
        version_parser: Turns the compiler version into the version for the pragma
        contract_address: Contract the files belong to, attached to raised errors

    Returns:
        MergeResult with the merged code
    """
    files_by_name = {}
    for file in files:
        files_by_name.setdefault(file.filename, file)

    try:
        version = version_parser(compiler_version)
    except CompilerVersionError as e:
        raise CompilerVersionError(e.message, e.compiler_version, contract_address) from e

    solidity_code = f"pragma solidity ={version};\n"

    for filename in order_filenames(files, ordered_filenames):
        file = files_by_name.get(filename)
        if file is None:
            raise MissingFileForOrderingError(
                f"Failed to find file with filename \"{filename}\"", filename, contract_address
            )
        solidity_code += prepare_file_for_merge(file.code)

    return MergeResult(solidity_code=solidity_code, contract_name=contract_name)


class SourceCodeMergingMixin:
    def get_solidity_code(self, contract_address: str, filename: Optional[str] = None) -> MergeResult:
        """
        Get the verified source code of a contract and merge all files into
        one long string of Solidity code.

        Args:
            contract_address: Contract address with a 0x prefix
            filename: Optional, case-sensitive name of one source file without the .sol extension

        Returns:
            MergeResult with the merged code and the contract name
        """
        fetched = self.get_source_code(contract_address, filename)

        declarations = self.declarations_from_fetch(fetched)
        # Dependent code first
        sorted_declarations = self.declaration_sorter(declarations)
        ordered_filenames = [declaration.relative_path for declaration in sorted_declarations]

        merged = merge_source_files(
            fetched.files,
            ordered_filenames,
            fetched.compiler_version,
            fetched.contract_name,
            version_parser=self.version_parser,
            contract_address=contract_address,
        )
        logger.info(f"Merged {len(fetched.files)} files for {contract_address} ({len(merged.solidity_code)} chars)")
        return merged
