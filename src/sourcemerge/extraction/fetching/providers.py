"""Etherscan `getsourcecode` fetcher."""

from pathlib import PurePosixPath
from typing import Any, Dict, List, Optional

import requests
from eth_utils import is_address

from ...exceptions import (
    InvalidAddressError,
    NoHttpResponseError,
    SourceFileNotFoundError,
    TransportError,
    UnexpectedResponseShapeError,
)
from ...models import FetchResult, Remapping, SourceFile
from ..shared import logger
from .normalization import normalize_source_result


class SourceCodeFetchingProviderMixin:
    def _request_source_code(self, contract_address: str, description: str) -> Dict[str, Any]:
        """
        Call the explorer and return the decoded JSON body.

        Args:
            contract_address: Contract address
            description: Operation description used in error messages

        Returns:
            Decoded JSON payload
        """
        params = {
            'module': 'contract',
            'action': 'getsourcecode',
            'address': contract_address,
            'apikey': self.etherscan_api_key,
        }

        logger.debug(f"About to get Solidity source code for {contract_address} from {self.url}")
        try:
            response = requests.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            if e.response is None:
                raise NoHttpResponseError(f"Failed to {description}. No HTTP response.", contract_address) from e
            raise TransportError(
                f"Failed to {description}. HTTP status code {e.response.status_code}, "
                f"status text: {e.response.reason}",
                contract_address,
                status_code=e.response.status_code,
                status_text=e.response.reason,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Failed to {description}. Response body is not JSON. HTTP status code "
                f"{response.status_code}, status text: {response.reason}",
                contract_address,
                status_code=response.status_code,
                status_text=response.reason,
            ) from e

    def get_source_code(self, contract_address: str, filename: Optional[str] = None) -> FetchResult:
        """
        Get the verified source code files of a contract from Etherscan.

        Args:
            contract_address: Contract address with a 0x prefix
            filename: Optional, case-sensitive name of one source file without the .sol extension

        Returns:
            FetchResult with the source files, contract name, compiler version and remappings
        """
        description = f"get verified source code for address {contract_address} from Etherscan API"

        if not isinstance(contract_address, str) or not is_address(contract_address):
            raise InvalidAddressError(f"Failed to {description}. Not a valid address.", str(contract_address))

        data = self._request_source_code(contract_address, description)

        results = data.get('result') if isinstance(data, dict) else None
        if not isinstance(results, list) or not results:
            raise UnexpectedResponseShapeError(
                f"Failed to {description}. No result array in HTTP data: {data}",
                contract_address,
                payload=data,
            )

        files: List[SourceFile] = []
        remappings: List[Remapping] = []
        seen = set()
        for result in results:
            result_files, result_remappings = normalize_source_result(result, contract_address)
            remappings.extend(result_remappings)
            for file in result_files:
                if file.filename in seen:
                    logger.warning(f"Duplicate source file \"{file.filename}\" for {contract_address}, keeping the first")
                    continue
                seen.add(file.filename)
                files.append(file)

        if filename:
            filename_with_ext = f"{filename}.sol"
            files = [f for f in files if PurePosixPath(f.filename).name == filename_with_ext]
            if not files:
                raise SourceFileNotFoundError(
                    f"Failed to find source file \"{filename}\" for contract {contract_address}",
                    contract_address,
                    filename=filename,
                )

        first = results[0] if isinstance(results[0], dict) else {}
        fetched = FetchResult(
            files=files,
            contract_name=first.get('ContractName') or '',
            compiler_version=first.get('CompilerVersion') or '',
            remappings=remappings,
            contract_address=contract_address,
        )
        logger.info(f"Fetched {len(files)} source files for {fetched.contract_name or contract_address} from Etherscan")
        return fetched
