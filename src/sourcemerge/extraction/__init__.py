"""Verified source extraction split by fetch/parse/merge flows."""

from .extractor import EtherscanSourceExtractor

__all__ = ["EtherscanSourceExtractor"]
