"""RAG-based question answering endpoint."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from documate.rag import RAGEngine
from documate.routes.deps import CORS_HEADERS, get_rag_engine

router = APIRouter(tags=["questions"])


class Question(BaseModel):
    question: Optional[str] = None


class Answer(BaseModel):
    answer: str


async def _read_question(request: Request) -> Optional[str]:
    try:
        body: Any = await request.json()
        return Question.model_validate(body).question
    except (ValueError, PydanticValidationError):
        # Unparseable bodies are treated the same as a missing question.
        return None


@router.api_route(
    "/ask",
    methods=["POST", "OPTIONS"],
    response_model=Answer,
)
async def ask(request: Request, rag: RAGEngine = Depends(get_rag_engine)):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    answer = await rag.ask_async(await _read_question(request))
    return JSONResponse(Answer(answer=answer).model_dump(), headers=CORS_HEADERS)
