"""Nearest-neighbour retrieval against the Qdrant collection."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from qdrant_client import AsyncQdrantClient

from documate.exceptions import ProviderError
from documate.logging_config import log_latency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    score: float
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.metadata.get("text") or ""

    @property
    def source(self):
        return self.metadata.get("source")

    @property
    def page(self):
        return self.metadata.get("page")

    @property
    def heading(self):
        return self.metadata.get("heading")


def select_matches(matches: Sequence[Match], min_score: float, limit: int) -> List[Match]:
    """Drop matches scoring below ``min_score``, then keep the best ``limit``.

    Thresholding runs before truncation so the cap only ever removes the
    lowest-scoring survivors.
    """
    kept = [m for m in matches if m.score >= min_score]
    kept.sort(key=lambda m: m.score, reverse=True)
    return kept[:limit]


class Retriever:
    def __init__(self, client: AsyncQdrantClient, collection_name: str):
        self.client = client
        self.collection_name = collection_name

    @log_latency("retriever.query")
    async def query(self, vector: List[float], top_k: int) -> List[Match]:
        try:
            result = await self.client.query_points(
                collection_name=self.collection_name,
                query=vector,
                limit=top_k,
                with_payload=True,
            )
        except Exception as e:
            raise ProviderError(str(e), provider="vector_index") from e

        points = getattr(result, "points", None)
        if points is None:
            raise ProviderError("Vector index returned no result set", provider="vector_index")

        matches = [Match(score=float(p.score), metadata=dict(p.payload or {})) for p in points]
        matches.sort(key=lambda m: m.score, reverse=True)
        return matches

    async def vector_size(self) -> int:
        try:
            info = await self.client.get_collection(self.collection_name)
        except Exception as e:
            raise ProviderError(str(e), provider="vector_index") from e
        return collection_vector_size(info)

    async def close(self):
        await self.client.close()


def collection_vector_size(info) -> int:
    vectors = info.config.params.vectors
    if isinstance(vectors, dict):
        # Named vectors: the collection is expected to carry exactly one.
        vectors = next(iter(vectors.values()))
    return vectors.size
