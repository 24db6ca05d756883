"""Public source-code extractor composed from focused flow mixins."""

from typing import Callable, List, Optional, Union

from ..models import ParsedSourceUnit, Remapping, SolidityDeclaration
from .fetching import SourceCodeFetchingMixin
from .fetching.base import DEFAULT_TIMEOUT
from .merging import SourceCodeMergingMixin
from .parsing import SourceCodeParsingMixin


class EtherscanSourceExtractor(
    SourceCodeFetchingMixin,
    SourceCodeParsingMixin,
    SourceCodeMergingMixin,
):
    """Composite extractor for verified source retrieval and merging."""

    def __init__(
        self,
        etherscan_api_key: Optional[str] = None,
        network: Union[str, int] = "ethereum",
        url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        source_parser: Optional[Callable[[str], ParsedSourceUnit]] = None,
        declaration_converter: Optional[
            Callable[[ParsedSourceUnit, str, List[Remapping]], List[SolidityDeclaration]]
        ] = None,
        declaration_sorter: Optional[Callable[[List[SolidityDeclaration]], List[SolidityDeclaration]]] = None,
        version_parser: Optional[Callable[[str], str]] = None,
    ):
        super().__init__(etherscan_api_key, network=network, url=url, timeout=timeout)
        if source_parser:
            self.source_parser = source_parser
        if declaration_converter:
            self.declaration_converter = declaration_converter
        if declaration_sorter:
            self.declaration_sorter = declaration_sorter
        if version_parser:
            self.version_parser = version_parser
