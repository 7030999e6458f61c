"""Cursor-based pagination: pages and the lazy result set built on them."""

from twilio_client_core.pagination.page import Page, RecordParser
from twilio_client_core.pagination.resource_set import PageSource, ResourceSet, ResultSetState

__all__ = [
    "Page",
    "PageSource",
    "RecordParser",
    "ResourceSet",
    "ResultSetState",
]
