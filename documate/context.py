"""Renders retrieved matches into the annotated context block handed to the model."""

from typing import Sequence

from documate.prompts import SEPARATOR
from documate.retriever import Match


def format_match(match: Match) -> str:
    page = match.page if match.page not in (None, "") else "N/A"
    heading = match.heading or "N/A"
    source = match.source or "unknown"
    header = (
        f"[Source: {source} | Page: {page} | Section: {heading} | "
        f"Relevance: {round(match.score * 100)}%]"
    )
    return f"{header}\n{match.text}"


def build_context(matches: Sequence[Match]) -> str:
    return SEPARATOR.join(format_match(m) for m in matches)
