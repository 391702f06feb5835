"""Core RAG engine: embed the question, retrieve and filter matches, build context, answer."""

import logging
from typing import Dict, List, Optional

import google.genai as genai
from google.genai import types
from qdrant_client import AsyncQdrantClient

from documate.answerer import Answerer
from documate.config import Settings
from documate.context import build_context
from documate.embeddings import Embedder, SentenceTransformerEmbedder
from documate.exceptions import ValidationError
from documate.logging_config import log_latency
from documate.prompts import DEFAULT_DEBUG_QUESTION
from documate.retriever import Retriever, select_matches

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200


class RAGEngine:
    def __init__(
        self,
        embedder: Embedder,
        retriever: Retriever,
        answerer: Answerer,
        *,
        top_k: int = 10,
        min_score: float = 0.65,
        max_context_chunks: int = 8,
        debug_top_k: int = 10,
    ):
        self.embedder = embedder
        self.retriever = retriever
        self.answerer = answerer
        self.top_k = top_k
        self.min_score = min_score
        self.max_context_chunks = max_context_chunks
        self.debug_top_k = debug_top_k

    @classmethod
    async def from_settings(cls, settings: Settings) -> "RAGEngine":
        embedder = SentenceTransformerEmbedder(settings.embedding_model)
        client = genai.Client(
            api_key=settings.require_gemini_key(),
            http_options=types.HttpOptions(timeout=int(settings.request_timeout * 1000)),
        )
        qdrant = AsyncQdrantClient(
            url=settings.qdrant_url,
            api_key=settings.qdrant_api_key,
            timeout=int(settings.request_timeout),
        )
        retriever = Retriever(qdrant, settings.collection_name)

        if not await qdrant.collection_exists(settings.collection_name):
            await qdrant.close()
            raise RuntimeError(
                f"Qdrant collection '{settings.collection_name}' not found. "
                "Run `python -m documate.index_documents` first."
            )
        index_size = await retriever.vector_size()
        if index_size != embedder.dimension:
            await qdrant.close()
            raise RuntimeError(
                f"Collection '{settings.collection_name}' stores {index_size}-dimension vectors "
                f"but '{settings.embedding_model}' produces {embedder.dimension}"
            )

        engine = cls(
            embedder,
            retriever,
            Answerer(client, settings.llm_model, settings.max_output_tokens),
            top_k=settings.top_k,
            min_score=settings.min_score,
            max_context_chunks=settings.max_context_chunks,
            debug_top_k=settings.debug_top_k,
        )
        logger.info("RAGEngine initialized successfully")
        return engine

    async def close(self):
        await self.retriever.close()
        logger.info("RAGEngine resources closed")

    @log_latency("rag.ask_async")
    async def ask_async(self, question: Optional[str]) -> str:
        if not isinstance(question, str) or not question.strip():
            raise ValidationError("Question is required")
        logger.info(f"Query received | question_length={len(question)}")

        vector = await self.embedder.embed_async(question)
        raw = await self.retriever.query(vector, self.top_k)
        matches = select_matches(raw, self.min_score, self.max_context_chunks)
        logger.info(f"Retrieval complete | raw={len(raw)} | kept={len(matches)}")

        context = build_context(matches)
        if not context:
            logger.warning("No documentation above the relevance threshold, answering without context")

        return await self.answerer.answer_async(question, context)

    @log_latency("rag.inspect_async")
    async def inspect_async(self, question: Optional[str] = None) -> List[Dict]:
        question = question or DEFAULT_DEBUG_QUESTION
        vector = await self.embedder.embed_async(question)
        matches = await self.retriever.query(vector, self.debug_top_k)

        return [
            {
                "score": round(m.score, 4),
                "source": m.source or "?",
                "heading": m.heading or "?",
                "page": m.page if m.page not in (None, "") else "?",
                "preview": m.text[:PREVIEW_CHARS],
            }
            for m in matches
        ]
