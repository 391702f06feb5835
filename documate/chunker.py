"""Fixed-size word-window chunking with deterministic record identity."""

import uuid
from typing import List

NAMESPACE_DOCUMATE = uuid.UUID("6ba7b810-9dad-11d1-80b4-00c04fd430c8")


def record_id(n: int) -> str:
    return f"doc_{n}"


def point_id(record: str) -> str:
    """Qdrant only accepts integer or UUID point ids, so map ``doc_<n>`` onto a stable UUID."""
    return str(uuid.uuid5(NAMESPACE_DOCUMATE, record))


def chunk_text(text: str, chunk_size: int = 400, min_chars: int = 100) -> List[str]:
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")

    words = text.split()
    chunks = []
    for start in range(0, len(words), chunk_size):
        chunk = " ".join(words[start : start + chunk_size])
        # Near-empty windows, usually a document's tail, are not worth indexing.
        if len(chunk) >= min_chars:
            chunks.append(chunk)
    return chunks
