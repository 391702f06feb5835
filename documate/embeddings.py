"""
Text embedding strategies.

SentenceTransformerEmbedder produces semantically meaningful vectors and is the
one the service queries with. PseudoEmbedder only exists to give the index a
vector of the required shape: it derives numbers from the character codes of a
short language-model reply concatenated with the input, so nearness between two
of its vectors says nothing about the meaning of their texts.
"""

import asyncio
from typing import List

import numpy as np
import google.genai as genai
from google.genai import types
from sentence_transformers import SentenceTransformer

from documate.exceptions import ProviderError
from documate.prompts import PSEUDO_EMBEDDING_PROMPT


class Embedder:
    """Turns text into a fixed-length vector of floats."""

    dimension: int

    def embed(self, text: str) -> List[float]:
        raise NotImplementedError

    async def embed_async(self, text: str) -> List[float]:
        return await asyncio.to_thread(self.embed, text)


class SentenceTransformerEmbedder(Embedder):
    def __init__(self, model_name: str = "all-mpnet-base-v2", model: SentenceTransformer = None):
        self.model = model if model is not None else SentenceTransformer(model_name)
        self.dimension = self.model.get_sentence_embedding_dimension()

    def embed(self, text: str) -> List[float]:
        try:
            embeddings = self.model.encode([text], convert_to_numpy=True, show_progress_bar=False)
        except Exception as e:
            raise ProviderError(str(e), provider="embedding") from e

        embeddings = np.asarray(embeddings, dtype=np.float32)
        if embeddings.ndim != 2 or embeddings.shape[1] != self.dimension:
            raise ProviderError(
                f"Embedding model returned shape {embeddings.shape}, expected (1, {self.dimension})",
                provider="embedding",
            )

        norm = np.linalg.norm(embeddings, axis=1, keepdims=True)
        norm[norm == 0] = 1.0
        return (embeddings / norm)[0].tolist()


class PseudoEmbedder(Embedder):
    """Character-code vectors seeded by a one-token model reply. Not semantic."""

    def __init__(
        self,
        client: genai.Client,
        model: str = "gemini-2.5-flash-lite",
        dimension: int = 1536,
    ):
        self.client = client
        self.model = model
        self.dimension = dimension

    def _snippet(self, text: str) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=PSEUDO_EMBEDDING_PROMPT.format(text=text),
                config=types.GenerateContentConfig(max_output_tokens=1),
            )
        except Exception as e:
            raise ProviderError(str(e), provider="llm") from e
        return response.text or ""

    def embed(self, text: str) -> List[float]:
        source = self._snippet(text) + text
        if not source:
            raise ProviderError("Nothing to derive a vector from", provider="llm")

        codes = [min(ord(source[i % len(source)]), 253) for i in range(self.dimension)]
        return [code / 127 - 1 for code in codes]
