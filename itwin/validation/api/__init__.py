"""Endpoint resolution: URL builders and query string encoding."""

from .url_formatter import (
    IModelsUrlFormatter,
    ValidationApiUrlFormatter,
    collection_url_params,
    form_query_string,
)

__all__ = [
    "IModelsUrlFormatter",
    "ValidationApiUrlFormatter",
    "collection_url_params",
    "form_query_string",
]
