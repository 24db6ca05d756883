"""
Exceptions raised while fetching and merging verified contract source.

Exception Hierarchy:
- SourceCodeError (base)
  ├── ConfigurationError
  ├── InvalidAddressError
  ├── UnverifiedContractError
  ├── MalformedSourceCodeError
  ├── UnexpectedResponseShapeError
  ├── TransportError
  ├── NoHttpResponseError
  ├── SourceFileNotFoundError
  ├── MissingFileForOrderingError
  ├── SourceParseError
  └── CompilerVersionError
"""

from typing import Any, Dict, Optional


class SourceCodeError(Exception):
    """Base exception for all source fetching and merging operations"""

    def __init__(self, message: str, contract_address: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.contract_address = contract_address
        self.details = details or {}
        super().__init__(message)

    def __str__(self):
        if self.contract_address:
            return f"[{self.contract_address}] {self.message}"
        return self.message


class ConfigurationError(SourceCodeError):
    """Raised when the extractor is created without usable settings"""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        super().__init__(message, details={'config_key': config_key})


class InvalidAddressError(SourceCodeError, ValueError):
    """Raised when the contract address is not a valid on-chain address"""


class UnverifiedContractError(SourceCodeError):
    """Raised when the explorer has no verified source for the address"""


class MalformedSourceCodeError(SourceCodeError):
    """Raised when a SourceCode blob cannot be decoded into source files"""

    def __init__(self, message: str, contract_address: Optional[str] = None, raw_source_code: Any = None):
        self.raw_source_code = raw_source_code
        super().__init__(message, contract_address, {'raw_source_code': raw_source_code})


class UnexpectedResponseShapeError(SourceCodeError):
    """Raised when the explorer payload has no usable result list"""

    def __init__(self, message: str, contract_address: Optional[str] = None, payload: Any = None):
        self.payload = payload
        super().__init__(message, contract_address, {'payload': payload})


class TransportError(SourceCodeError):
    """Raised when the explorer answered, but not with a usable response"""

    def __init__(self, message: str, contract_address: Optional[str] = None,
                 status_code: Optional[int] = None, status_text: Optional[str] = None):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(message, contract_address, {'status_code': status_code, 'status_text': status_text})


class NoHttpResponseError(SourceCodeError):
    """Raised when the HTTP call never produced a response"""


class SourceFileNotFoundError(SourceCodeError):
    """Raised when a requested source file is not part of the contract"""

    def __init__(self, message: str, contract_address: Optional[str] = None, filename: Optional[str] = None):
        self.filename = filename
        super().__init__(message, contract_address, {'filename': filename})


class MissingFileForOrderingError(SourceCodeError):
    """Raised when the dependency order names a file that was never fetched"""

    def __init__(self, message: str, filename: Optional[str] = None, contract_address: Optional[str] = None):
        self.filename = filename
        super().__init__(message, contract_address, {'filename': filename})


class SourceParseError(SourceCodeError):
    """Raised when Solidity source text cannot be parsed"""

    def __init__(self, message: str, source_code: str = "", filename: Optional[str] = None,
                 contract_address: Optional[str] = None):
        self.source_code = source_code
        self.filename = filename
        super().__init__(message, contract_address, {'source_code': source_code, 'filename': filename})


class CompilerVersionError(SourceCodeError):
    """Raised when a compiler version string has no semantic version in it"""

    def __init__(self, message: str, compiler_version: Optional[str] = None, contract_address: Optional[str] = None):
        self.compiler_version = compiler_version
        super().__init__(message, contract_address, {'compiler_version': compiler_version})
