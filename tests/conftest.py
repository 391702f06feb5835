"""
Shared test fixtures.

Provider clients are replaced at the SDK boundary: an AsyncMock stands in for
the Qdrant client and a MagicMock for the Gemini client, so the real Retriever,
Answerer and RAGEngine code paths run in every test.
"""

from types import SimpleNamespace
from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest

from documate.answerer import Answerer
from documate.embeddings import Embedder
from documate.rag import RAGEngine
from documate.retriever import Retriever


class FakeEmbedder(Embedder):
    """Deterministic embedder that records the texts it was asked to embed."""

    def __init__(self, dimension: int = 4):
        self.dimension = dimension
        self.calls: List[str] = []

    def embed(self, text: str) -> List[float]:
        self.calls.append(text)
        return [0.1] * self.dimension


def make_point(score: float, **payload) -> SimpleNamespace:
    """Build an object shaped like a Qdrant ScoredPoint."""
    return SimpleNamespace(score=score, payload=payload)


@pytest.fixture
def embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def qdrant() -> AsyncMock:
    client = AsyncMock()
    client.query_points.return_value = SimpleNamespace(points=[])
    return client


@pytest.fixture
def genai_client() -> MagicMock:
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text="Generated answer")
    return client


@pytest.fixture
def engine(embedder, qdrant, genai_client) -> RAGEngine:
    return RAGEngine(embedder, Retriever(qdrant, "test-index"), Answerer(genai_client))


def sent_prompt(genai_client: MagicMock) -> str:
    """Return the prompt passed to the last generate_content call."""
    return genai_client.models.generate_content.call_args.kwargs["contents"]
