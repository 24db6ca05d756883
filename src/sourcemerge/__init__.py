"""Fetch verified contract source from Etherscan-like explorers and merge it into one file."""

from .exceptions import (
    CompilerVersionError,
    ConfigurationError,
    InvalidAddressError,
    MalformedSourceCodeError,
    MissingFileForOrderingError,
    NoHttpResponseError,
    SourceCodeError,
    SourceFileNotFoundError,
    SourceParseError,
    TransportError,
    UnexpectedResponseShapeError,
    UnverifiedContractError,
)
from .extraction import EtherscanSourceExtractor
from .extraction.fetching import normalize_source_result, parse_remapping, parse_remappings
from .extraction.merging import merge_source_files
from .extraction.parsing import parse_solidity_version
from .models import ContractMetadata, FetchResult, MergeResult, Remapping, SourceFile
from .networks import NETWORKS, set_chain_id

__all__ = [
    "CompilerVersionError",
    "ConfigurationError",
    "ContractMetadata",
    "EtherscanSourceExtractor",
    "FetchResult",
    "InvalidAddressError",
    "MalformedSourceCodeError",
    "MergeResult",
    "MissingFileForOrderingError",
    "NETWORKS",
    "NoHttpResponseError",
    "Remapping",
    "SourceCodeError",
    "SourceFile",
    "SourceFileNotFoundError",
    "SourceParseError",
    "TransportError",
    "UnexpectedResponseShapeError",
    "UnverifiedContractError",
    "merge_source_files",
    "normalize_source_result",
    "parse_remapping",
    "parse_remappings",
    "parse_solidity_version",
    "set_chain_id",
]
