"""Raw retrieval inspection for checking what the index returns for a query."""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from documate.rag import RAGEngine
from documate.routes.deps import CORS_HEADERS, get_rag_engine

router = APIRouter(tags=["debug"])


@router.get("/debug")
async def debug(q: Optional[str] = None, rag: RAGEngine = Depends(get_rag_engine)):
    matches = await rag.inspect_async(q)
    return JSONResponse(matches, headers=CORS_HEADERS)
