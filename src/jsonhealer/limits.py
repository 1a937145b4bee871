"""Input size guard shared by the REST API and the MCP server."""

from __future__ import annotations

DEFAULT_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters


class DocumentTooLargeError(ValueError):
    """Raised when a document exceeds the configured size limit."""


def check_document_size(text: str, limit: int = DEFAULT_MAX_DOCUMENT_SIZE) -> None:
    if len(text) > limit:
        raise DocumentTooLargeError(
            f"Document exceeds maximum size ({len(text):,} chars > {limit:,} limit)"
        )
