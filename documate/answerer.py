"""Answer generation with Gemini."""

import asyncio
import logging

import google.genai as genai
from google.genai import types

from documate.exceptions import ProviderError
from documate.logging_config import log_latency
from documate.prompts import ANSWER_PROMPT, NO_CONTEXT_PROMPT, SYSTEM_INSTRUCTION

logger = logging.getLogger(__name__)


def build_prompt(question: str, context: str) -> str:
    if not context:
        return NO_CONTEXT_PROMPT.format(question=question)
    return ANSWER_PROMPT.format(context=context, question=question)


class Answerer:
    def __init__(self, client: genai.Client, model: str = "gemini-2.5-flash", max_output_tokens: int = 1024):
        self.client = client
        self.model = model
        self.max_output_tokens = max_output_tokens

    def answer(self, question: str, context: str) -> str:
        prompt = build_prompt(question, context)
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_INSTRUCTION,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except Exception as e:
            raise ProviderError(str(e), provider="llm") from e

        text = (response.text or "").strip()
        if not text:
            raise ProviderError("Language model returned an empty answer", provider="llm")
        logger.info(f"LLM response received | answer_length={len(text)}")
        return text

    @log_latency("answerer.answer")
    async def answer_async(self, question: str, context: str) -> str:
        return await asyncio.to_thread(self.answer, question, context)
