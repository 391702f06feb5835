"""Source document discovery and PDF text extraction."""

from pathlib import Path
from typing import Iterable, List

import fitz

PDF_EXTENSIONS = (".pdf",)


def list_documents(folder: Path, extensions: Iterable[str] = PDF_EXTENSIONS) -> List[Path]:
    folder = Path(folder)
    if not folder.is_dir():
        raise FileNotFoundError(f"Document folder not found: {folder}")

    suffixes = {e.lower() for e in extensions}
    return sorted(p for p in folder.iterdir() if p.is_file() and p.suffix.lower() in suffixes)


def extract_page_text(page) -> str:
    return " ".join(
        block[4] for block in page.get_text("blocks")
        if block[6] == 0 and block[4].strip()
    )


def extract_pdf_text(pdf_path: Path) -> str:
    with fitz.open(pdf_path) as doc:
        return "\n".join(extract_page_text(page) for page in doc)
