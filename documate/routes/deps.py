"""Shared route dependencies and response headers."""

from fastapi import Request

from documate.rag import RAGEngine

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def get_rag_engine(request: Request) -> RAGEngine:
    return request.app.state.rag
