"""Import remapping rules from the explorer's compiler settings."""

import re
from typing import Iterable, List, Optional

from ...exceptions import MalformedSourceCodeError
from ...models import Remapping


def parse_remappings(raw_mappings: Optional[Iterable[str]], contract_address: Optional[str] = None) -> List[Remapping]:
    """
    Parse the explorer's remappings config.

    Args:
        raw_mappings: Strings like "@openzeppelin/=lib/openzeppelin-contracts/", or None
        contract_address: Contract the settings belong to, for error reporting

    Returns:
        List of Remapping rules, empty when there are no settings
    """
    if not raw_mappings:
        return []
    return [parse_remapping(mapping, contract_address) for mapping in raw_mappings]


def parse_remapping(mapping: str, contract_address: Optional[str] = None) -> Remapping:
    """
    Parse a single mapping such as "@openzeppelin/=lib/openzeppelin-contracts/".

    Everything before the first '=' becomes a pattern anchored to the start
    of a path. The prefix is not escaped.
    """
    prefix, _, replacement = mapping.partition('=')
    try:
        pattern = re.compile('^' + prefix)
    except re.error as e:
        raise MalformedSourceCodeError(
            f"Remapping prefix {prefix!r} is not a valid pattern",
            contract_address,
            raw_source_code=mapping,
        ) from e
    return Remapping(from_=pattern, to=replacement)


def apply_remappings(path: str, remappings: List[Remapping]) -> str:
    """Rewrite an import path with the first matching remapping rule."""
    for remapping in remappings:
        if remapping.from_.match(path):
            return remapping.from_.sub(lambda _: remapping.to, path, count=1)
    return path
