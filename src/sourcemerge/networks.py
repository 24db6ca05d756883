"""Explorer network names and their chain ids."""

import re
from typing import Union

DEFAULT_CHAIN_ID = 1

ETHERSCAN_V2_URL = "https://api.etherscan.io/v2/api"

NETWORK_CHAIN_IDS = {
        "ethereum": 1,
        "sepolia": 11155111,
        "holesky": 17000,
        "hoodi": 560048,
        "arbitrum": 42161,
        "optimism": 10,
        "polygon": 137,
        "avalanche": 43114,
        "base": 8453,
        "bsc": 56,            # BNB Smart Chain
        "crono": 25,          # Cronos
        "fantom": 250,
        "sonic": 146,
        "gnosis": 100,
        "moonbeam": 1284,
        "celo": 42220,
        "scroll": 534352,
        "linea": 59144,
        "blast": 81457,
        "berachain": 80094,
        "zksync": 324,
}

NETWORKS = tuple(NETWORK_CHAIN_IDS)

_INTEGER_PATTERN = re.compile(r'^-?(0|[1-9]\d*)$')


def set_chain_id(network: Union[str, int]) -> int:
    """
    Map a network name to its chain id.

    Integer-looking values pass through unchanged and unknown names fall
    back to Ethereum mainnet.
    """
    network = str(network)
    if _INTEGER_PATTERN.match(network):
        return int(network)
    return NETWORK_CHAIN_IDS.get(network, DEFAULT_CHAIN_ID)


def get_explorer_url(chain_id: int) -> str:
    return f"{ETHERSCAN_V2_URL}?chainid={chain_id}"
