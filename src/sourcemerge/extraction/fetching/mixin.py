"""Composed source fetching mixin from focused fetching stages."""

from .base import SourceCodeFetchingBaseMixin
from .providers import SourceCodeFetchingProviderMixin


class SourceCodeFetchingMixin(
    SourceCodeFetchingBaseMixin,
    SourceCodeFetchingProviderMixin,
):
    """Composite fetching mixin."""

    pass
