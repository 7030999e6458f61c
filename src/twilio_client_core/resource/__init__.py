"""Generic fetcher and reader, parametrized by a ``ResourceDefinition``."""

from twilio_client_core.resource.definition import FilterKind, QueryFilter, ResourceDefinition
from twilio_client_core.resource.fetcher import Fetcher
from twilio_client_core.resource.reader import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Reader

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "Fetcher",
    "FilterKind",
    "QueryFilter",
    "Reader",
    "ResourceDefinition",
]
