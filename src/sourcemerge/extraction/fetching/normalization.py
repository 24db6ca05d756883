"""Normalization of Etherscan `getsourcecode` result records into source files."""

import json
from enum import Enum
from typing import Any, Dict, List, Tuple

from ...exceptions import MalformedSourceCodeError, UnexpectedResponseShapeError, UnverifiedContractError
from ...models import Remapping, SourceFile
from ..shared import logger
from .remappings import parse_remappings


class SourceCodeShape(str, Enum):
    UNVERIFIED = "unverified"
    JSON_STRING = "json_string"
    DOUBLE_WRAPPED_JSON_STRING = "double_wrapped_json_string"
    PARSED_OBJECT = "parsed_object"
    INLINE = "inline"
    UNSUPPORTED = "unsupported"


def classify_source_code(source_code: Any) -> SourceCodeShape:
    """Work out which of the explorer's encodings a SourceCode field uses."""
    if not source_code:
        return SourceCodeShape.UNVERIFIED
    if isinstance(source_code, dict):
        return SourceCodeShape.PARSED_OBJECT
    if not isinstance(source_code, str):
        return SourceCodeShape.UNSUPPORTED
    if source_code.startswith('{'):
        # Etherscan wraps standard JSON input in an extra pair of braces
        if source_code[1:2] == '{':
            return SourceCodeShape.DOUBLE_WRAPPED_JSON_STRING
        return SourceCodeShape.JSON_STRING
    return SourceCodeShape.INLINE


def _files_from_project(project: Dict[str, Any], contract_address: str) -> List[SourceFile]:
    """
    Map a decoded project object to source files.

    Files are either under a nested `sources` key or are the top-level
    entries of the object itself.
    """
    if 'sources' in project:
        entries = project['sources']
        if not isinstance(entries, dict):
            raise MalformedSourceCodeError(
                "Failed to parse Solidity source code from Etherscan's SourceCode. `sources` is not an object",
                contract_address,
                raw_source_code=project,
            )
    else:
        entries = {
            filename: filedata for filename, filedata in project.items()
            if isinstance(filedata, dict) and 'content' in filedata
        }
        skipped = [key for key in project if key not in entries]
        if skipped:
            logger.debug(f"Skipped non-file keys in SourceCode object: {skipped}")

    files = []
    for filename, filedata in entries.items():
        content = filedata.get('content') if isinstance(filedata, dict) else None
        if not isinstance(content, str):
            raise MalformedSourceCodeError(
                f"Failed to parse Solidity source code from Etherscan's SourceCode. No content for file \"{filename}\"",
                contract_address,
                raw_source_code=project,
            )
        files.append(SourceFile(filename=filename, code=content))

    if not files:
        raise MalformedSourceCodeError(
            "Failed to parse Solidity source code from Etherscan's SourceCode. No source files found",
            contract_address,
            raw_source_code=project,
        )
    return files


def _remappings_from_project(project: Dict[str, Any], contract_address: str) -> List[Remapping]:
    settings = project.get('settings')
    if not isinstance(settings, dict):
        return []
    return parse_remappings(settings.get('remappings'), contract_address)


def _decode_json_source(source_code: str, contract_address: str) -> Dict[str, Any]:
    try:
        project = json.loads(source_code)
    except json.JSONDecodeError as e:
        raise MalformedSourceCodeError(
            f"Failed to parse Solidity source code from Etherscan's SourceCode. {e}",
            contract_address,
            raw_source_code=source_code,
        ) from e
    if not isinstance(project, dict):
        raise MalformedSourceCodeError(
            "Failed to parse Solidity source code from Etherscan's SourceCode. Decoded JSON is not an object",
            contract_address,
            raw_source_code=source_code,
        )
    return project


def _normalize_unverified(source_code: Any, contract_address: str) -> Tuple[List[SourceFile], List[Remapping]]:
    raise UnverifiedContractError(
        "Failed to get verified source code from Etherscan API. "
        "Most likely the contract has not been verified on Etherscan.",
        contract_address,
    )


def _normalize_json_string(source_code: str, contract_address: str) -> Tuple[List[SourceFile], List[Remapping]]:
    project = _decode_json_source(source_code, contract_address)
    return _files_from_project(project, contract_address), _remappings_from_project(project, contract_address)


def _normalize_double_wrapped(source_code: str, contract_address: str) -> Tuple[List[SourceFile], List[Remapping]]:
    # Remove the first { and last } so the rest can be JSON parsed
    project = _decode_json_source(source_code[1:-1], contract_address)
    return _files_from_project(project, contract_address), _remappings_from_project(project, contract_address)


def _normalize_parsed_object(source_code: Dict[str, Any], contract_address: str) -> Tuple[List[SourceFile], List[Remapping]]:
    return _files_from_project(source_code, contract_address), _remappings_from_project(source_code, contract_address)


def _normalize_inline(source_code: str, contract_address: str) -> Tuple[List[SourceFile], List[Remapping]]:
    # Source was not uploaded as multiple files so it is all in the SourceCode field
    return [SourceFile(filename=contract_address, code=source_code)], []


def _normalize_unsupported(source_code: Any, contract_address: str) -> Tuple[List[SourceFile], List[Remapping]]:
    raise MalformedSourceCodeError(
        f"Failed to parse Solidity source code from Etherscan's SourceCode. Unsupported type {type(source_code).__name__}",
        contract_address,
        raw_source_code=source_code,
    )


_SHAPE_HANDLERS = {
    SourceCodeShape.UNVERIFIED: _normalize_unverified,
    SourceCodeShape.JSON_STRING: _normalize_json_string,
    SourceCodeShape.DOUBLE_WRAPPED_JSON_STRING: _normalize_double_wrapped,
    SourceCodeShape.PARSED_OBJECT: _normalize_parsed_object,
    SourceCodeShape.INLINE: _normalize_inline,
    SourceCodeShape.UNSUPPORTED: _normalize_unsupported,
}


def normalize_source_result(result: Dict[str, Any], contract_address: str) -> Tuple[List[SourceFile], List[Remapping]]:
    """
    Normalize one record of an Etherscan `getsourcecode` result.

    Args:
        result: One element of the response's `result` array
        contract_address: Contract address, used as the filename of inlined source

    Returns:
        Tuple of (source files, remappings). Remappings is empty when the
        record has no remapping settings.
    """
    if not isinstance(result, dict):
        raise UnexpectedResponseShapeError(
            f"Failed to get verified source code from Etherscan API. Result record is not an object: {result!r}",
            contract_address,
            payload=result,
        )
    source_code = result.get('SourceCode')
    shape = classify_source_code(source_code)
    logger.debug(f"SourceCode for {contract_address} has shape {shape.value}")
    return _SHAPE_HANDLERS[shape](source_code, contract_address)
