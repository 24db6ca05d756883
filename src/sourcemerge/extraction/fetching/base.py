"""Base fetching mixin: explorer settings and endpoint resolution."""

from typing import Optional, Union

from ...exceptions import ConfigurationError
from ...networks import get_explorer_url, set_chain_id
from ..shared import logger

DEFAULT_TIMEOUT = 30


class SourceCodeFetchingBaseMixin:
    def __init__(
        self,
        etherscan_api_key: Optional[str] = None,
        network: Union[str, int] = "ethereum",
        url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the extractor.

        Args:
            etherscan_api_key: Etherscan API key
            network: Network name or chain id, e.g. "ethereum", "arbitrum" or "8453"
            url: Explorer API url. Overrides the url derived from the network.
            timeout: Seconds to wait for the explorer before giving up

        Raises:
            ConfigurationError: If there is neither an API key nor an explicit url
        """
        if timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {timeout}", config_key="EXPLORER_TIMEOUT")

        self.etherscan_api_key = etherscan_api_key
        self.network = str(network)
        self.timeout = timeout

        if url:
            self.url = url
            return

        if not etherscan_api_key:
            raise ConfigurationError(
                "The API key must be set when getting verified source code from an Etherscan like explorer",
                config_key="ETHERSCAN_API_KEY",
            )

        chain_id = set_chain_id(network)
        logger.debug(f"Chain id {chain_id} for network {network}")
        self.url = get_explorer_url(chain_id)
