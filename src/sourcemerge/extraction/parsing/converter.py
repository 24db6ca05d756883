"""Conversion of parsed source units into the declaration model used for ordering."""

import posixpath
from typing import List

from ...models import ParsedSourceUnit, Remapping, SolidityDeclaration
from ..fetching.remappings import apply_remappings
from .parser import extract_identifiers


def resolve_import_path(import_path: str, filename: str, remappings: List[Remapping]) -> str:
    """
    Resolve an import specifier relative to the importing file.

    Remappings are applied first. Paths starting with `.` are then joined
    to the directory of the importing file.
    """
    path = apply_remappings(import_path, remappings)
    if path.startswith('.'):
        path = posixpath.normpath(posixpath.join(posixpath.dirname(filename), path))
    return path


def convert_unit_to_declarations(
    unit: ParsedSourceUnit,
    filename: str,
    remappings: List[Remapping],
) -> List[SolidityDeclaration]:
    """
    Convert one parsed file into declarations tagged with their file.

    Args:
        unit: Parsed source unit
        filename: Filename the unit was parsed from
        remappings: Import remappings of the contract

    Returns:
        One SolidityDeclaration per top-level declaration
    """
    imports = [resolve_import_path(path, filename, remappings) for path in unit.imports]
    declarations = []
    for parsed in unit.declarations:
        references = [
            identifier for identifier in extract_identifiers(parsed.body)
            if identifier != parsed.name and identifier not in parsed.base_contracts
        ]
        declarations.append(SolidityDeclaration(
            name=parsed.name,
            kind=parsed.kind,
            relative_path=filename,
            base_contracts=parsed.base_contracts,
            references=references,
            imports=imports,
        ))
    return declarations
