from types import SimpleNamespace

import pytest

from documate.answerer import Answerer, build_prompt
from documate.exceptions import ProviderError
from documate.prompts import CONFIDENCE_THRESHOLD, SYSTEM_INSTRUCTION
from tests.conftest import sent_prompt


class TestBuildPrompt:
    def test_context_and_question_are_embedded(self):
        prompt = build_prompt("How do I clone a form?", "[Source: a.pdf]\nClone it.")

        assert "DOCUMENTATION CONTEXT:\n[Source: a.pdf]\nClone it." in prompt
        assert prompt.endswith("QUESTION: How do I clone a form?")

    def test_empty_context_says_no_documentation_found(self):
        prompt = build_prompt("What is a UI policy?", "")

        assert "No relevant documentation was found" in prompt
        assert "general knowledge" in prompt
        assert "DOCUMENTATION CONTEXT" not in prompt


class TestSystemInstruction:
    def test_gates_follow_up_section_on_threshold(self):
        assert CONFIDENCE_THRESHOLD == 70
        assert f"below {CONFIDENCE_THRESHOLD}" in SYSTEM_INSTRUCTION
        assert "### Follow-up questions" in SYSTEM_INSTRUCTION

    def test_asks_for_steps_citations_and_rationale(self):
        for phrase in ["numbered steps", "navigation path", "common mistakes", "cite its source, page and section heading"]:
            assert phrase in SYSTEM_INSTRUCTION

    def test_never_reveals_the_rating(self):
        assert "Never reveal that rating" in SYSTEM_INSTRUCTION


class TestAnswerer:
    def test_sends_system_instruction_and_prompt(self, genai_client):
        answerer = Answerer(genai_client, model="gemini-test", max_output_tokens=256)

        answer = answerer.answer("Why?", "context text")

        assert answer == "Generated answer"
        kwargs = genai_client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["config"].system_instruction == SYSTEM_INSTRUCTION
        assert kwargs["config"].max_output_tokens == 256
        assert "context text" in sent_prompt(genai_client)

    def test_strips_whitespace(self, genai_client):
        genai_client.models.generate_content.return_value = SimpleNamespace(text="  answer \n")

        assert Answerer(genai_client).answer("q", "") == "answer"

    def test_upstream_failure_becomes_provider_error(self, genai_client):
        genai_client.models.generate_content.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(ProviderError) as exc_info:
            Answerer(genai_client).answer("q", "")

        assert exc_info.value.message == "quota exceeded"
        assert exc_info.value.provider == "llm"

    def test_empty_response_is_provider_error(self, genai_client):
        genai_client.models.generate_content.return_value = SimpleNamespace(text=None)

        with pytest.raises(ProviderError):
            Answerer(genai_client).answer("q", "")

    @pytest.mark.asyncio
    async def test_answer_async(self, genai_client):
        assert await Answerer(genai_client).answer_async("q", "c") == "Generated answer"
