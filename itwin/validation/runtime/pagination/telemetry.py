"""Structured logging for collection iteration.

This module provides telemetry hooks for page retrieval, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    url: str,
    page_index: int,
    entity_count: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log retrieval of a single page.

    Args:
        url: URL the page was fetched from
        page_index: Zero-based index of the page within the iteration
        entity_count: Number of entities on the page
        has_next: Whether the page carried a continuation link
        latency_ms: Round trip latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "url": url,
            "page_index": page_index,
            "entity_count": entity_count,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    url: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page retrieval.

    Args:
        url: URL of the failed request
        page_index: Zero-based index of the page that failed
        error_type: Exception class name (e.g., "TransportError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "url": url,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_iteration_exhausted(*, pages_fetched: int, entities_fetched: int) -> None:
    logger.debug(
        "iteration_exhausted",
        extra={"pages_fetched": pages_fetched, "entities_fetched": entities_fetched},
    )
