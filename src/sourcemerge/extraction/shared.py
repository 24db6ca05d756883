"""Shared logging for the source extraction flow."""

import logging

logger = logging.getLogger(__name__)
