import pytest

from documate.config import Settings

ENV_VARS = [
    "GEMINI_API_KEY", "QDRANT_URL", "QDRANT_API_KEY", "QDRANT_COLLECTION", "LLM_MODEL",
    "MAX_OUTPUT_TOKENS", "EMBEDDING_MODEL", "PSEUDO_EMBEDDING_MODEL",
    "PSEUDO_EMBEDDING_DIMENSION", "REQUEST_TIMEOUT", "DOCS_FOLDER", "UPSERT_DELAY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()

    assert settings.collection_name == "documate-index"
    assert settings.top_k == 10
    assert settings.min_score == 0.65
    assert settings.max_context_chunks == 8
    assert settings.chunk_size == 400
    assert settings.min_chunk_chars == 100
    assert settings.pseudo_embedding_dimension == 1536
    assert settings.upsert_delay == 0.3


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("QDRANT_URL", "http://qdrant:6333")
    monkeypatch.setenv("QDRANT_COLLECTION", "docs")
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("PSEUDO_EMBEDDING_DIMENSION", "768")

    settings = Settings.from_env()

    assert settings.require_gemini_key() == "secret"
    assert settings.qdrant_url == "http://qdrant:6333"
    assert settings.collection_name == "docs"
    assert settings.request_timeout == 12.5
    assert settings.pseudo_embedding_dimension == 768


def test_malformed_number_names_the_variable(monkeypatch):
    monkeypatch.setenv("UPSERT_DELAY", "soon")

    with pytest.raises(ValueError, match="UPSERT_DELAY"):
        Settings.from_env()


def test_missing_gemini_key_fails_fast():
    with pytest.raises(RuntimeError, match="GEMINI_API_KEY"):
        Settings.from_env().require_gemini_key()
