"""Environment-driven settings shared by the API service and the ingestion job."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    gemini_api_key: Optional[str] = None
    qdrant_url: str = "http://localhost:6333"
    qdrant_api_key: Optional[str] = None
    collection_name: str = "documate-index"

    llm_model: str = "gemini-2.5-flash"
    max_output_tokens: int = 1024
    embedding_model: str = "all-mpnet-base-v2"
    pseudo_embedding_model: str = "gemini-2.5-flash-lite"
    pseudo_embedding_dimension: int = 1536
    request_timeout: float = 30.0

    top_k: int = 10
    min_score: float = 0.65
    max_context_chunks: int = 8
    debug_top_k: int = 10

    docs_folder: str = "docs"
    chunk_size: int = 400
    min_chunk_chars: int = 100
    max_stored_text: int = 1000
    upsert_delay: float = 0.3

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            qdrant_url=os.getenv("QDRANT_URL", cls.qdrant_url),
            qdrant_api_key=os.getenv("QDRANT_API_KEY") or None,
            collection_name=os.getenv("QDRANT_COLLECTION", cls.collection_name),
            llm_model=os.getenv("LLM_MODEL", cls.llm_model),
            max_output_tokens=_env_int("MAX_OUTPUT_TOKENS", cls.max_output_tokens),
            embedding_model=os.getenv("EMBEDDING_MODEL", cls.embedding_model),
            pseudo_embedding_model=os.getenv("PSEUDO_EMBEDDING_MODEL", cls.pseudo_embedding_model),
            pseudo_embedding_dimension=_env_int(
                "PSEUDO_EMBEDDING_DIMENSION", cls.pseudo_embedding_dimension
            ),
            request_timeout=_env_float("REQUEST_TIMEOUT", cls.request_timeout),
            docs_folder=os.getenv("DOCS_FOLDER", cls.docs_folder),
            upsert_delay=_env_float("UPSERT_DELAY", cls.upsert_delay),
        )

    def require_gemini_key(self) -> str:
        if not self.gemini_api_key:
            raise RuntimeError("GEMINI_API_KEY not found in environment")
        return self.gemini_api_key
