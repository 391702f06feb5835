"""
Exception hierarchy for DocuMate.

ValidationError maps to a 4xx response, ProviderError to a 500 carrying the
upstream message, and IngestionItemError marks one failed document in a batch
load without aborting the batch.
"""

from typing import Any, Dict, Optional


class DocumateError(Exception):
    """Base exception for all DocuMate errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ValidationError(DocumateError):
    """Raised when a request is rejected before any provider is called."""

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, details)


class ProviderError(DocumateError):
    """Raised when the embedding, vector index or language-model call fails."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if provider:
            details["provider"] = provider
        self.provider = provider
        super().__init__(message, details)


class IngestionItemError(DocumateError):
    """Raised when a single source document cannot be ingested."""

    def __init__(self, filename: str, message: str) -> None:
        self.filename = filename
        super().__init__(message, {"filename": filename})

    def __str__(self) -> str:
        return f"{self.filename}: {self.message}"
