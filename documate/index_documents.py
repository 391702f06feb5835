"""Offline indexing pipeline: reads PDFs, chunks them, embeds each chunk, and upserts it into Qdrant."""

import argparse
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List

import google.genai as genai
from google.genai import types
from qdrant_client import QdrantClient
from qdrant_client.models import Distance, PointStruct, VectorParams

from documate.chunker import chunk_text, point_id, record_id
from documate.config import Settings
from documate.embeddings import Embedder, PseudoEmbedder, SentenceTransformerEmbedder
from documate.exceptions import IngestionItemError
from documate.ingest import extract_pdf_text, list_documents
from documate.logging_config import setup_logging, stage_timer
from documate.retriever import collection_vector_size

logger = logging.getLogger(__name__)


class Throttle:
    """Keeps at least ``interval`` seconds between consecutive ``wait`` returns."""

    def __init__(self, interval: float, clock: Callable[[], float] = time.monotonic, sleep=time.sleep):
        self.interval = interval
        self.clock = clock
        self.sleep = sleep
        self._last = None

    def wait(self):
        if self._last is not None:
            remaining = self.interval - (self.clock() - self._last)
            if remaining > 0:
                self.sleep(remaining)
        self._last = self.clock()


@dataclass
class IngestionReport:
    total_chunks: int = 0
    processed: List[str] = field(default_factory=list)
    failed: List[IngestionItemError] = field(default_factory=list)


class IngestionJob:
    def __init__(
        self,
        embedder: Embedder,
        client: QdrantClient,
        collection_name: str,
        *,
        chunk_size: int = 400,
        min_chunk_chars: int = 100,
        max_stored_text: int = 1000,
        throttle: Throttle = None,
        extract_text: Callable[[Path], str] = extract_pdf_text,
    ):
        self.embedder = embedder
        self.client = client
        self.collection_name = collection_name
        self.chunk_size = chunk_size
        self.min_chunk_chars = min_chunk_chars
        self.max_stored_text = max_stored_text
        self.throttle = throttle or Throttle(0.3)
        self.extract_text = extract_text

    def ensure_collection(self):
        if not self.client.collection_exists(self.collection_name):
            self.client.create_collection(
                collection_name=self.collection_name,
                vectors_config=VectorParams(size=self.embedder.dimension, distance=Distance.COSINE),
            )
            logger.info(f"Created collection '{self.collection_name}' | size={self.embedder.dimension}")
            return

        size = collection_vector_size(self.client.get_collection(self.collection_name))
        if size != self.embedder.dimension:
            raise RuntimeError(
                f"Collection '{self.collection_name}' stores {size}-dimension vectors "
                f"but the embedder produces {self.embedder.dimension}"
            )

    def run(self, files: List[Path]) -> IngestionReport:
        self.ensure_collection()
        report = IngestionReport()

        for path in files:
            logger.info(f"Reading: {path.name}")
            try:
                with stage_timer(f"ingest.document | file={path.name}", logger):
                    written = self._ingest_document(path, report)
            except Exception as e:
                error = IngestionItemError(path.name, str(e))
                logger.error(f"Error processing {error}")
                report.failed.append(error)
                continue
            report.processed.append(path.name)
            logger.info(f"Done with {path.name} | chunks={written}")

        logger.info(
            f"Loaded {report.total_chunks} chunks into Qdrant | "
            f"processed={len(report.processed)} | failed={len(report.failed)}"
        )
        return report

    def _ingest_document(self, path: Path, report: IngestionReport) -> int:
        chunks = chunk_text(self.extract_text(path), self.chunk_size, self.min_chunk_chars)
        logger.info(f"Split {path.name} into {len(chunks)} chunks")

        for i, chunk in enumerate(chunks):
            record = record_id(report.total_chunks)
            vector = self.embedder.embed(chunk)
            self.throttle.wait()
            self.client.upsert(
                collection_name=self.collection_name,
                points=[
                    PointStruct(
                        id=point_id(record),
                        vector=vector,
                        payload={
                            "record_id": record,
                            "text": chunk[: self.max_stored_text],
                            "source": path.name,
                            "chunkIndex": i,
                        },
                    )
                ],
            )
            report.total_chunks += 1
            logger.debug(f"Upserted {record} | chunk {i + 1}/{len(chunks)}")
        return len(chunks)


def build_embedder(kind: str, settings: Settings) -> Embedder:
    if kind == "pseudo":
        logger.warning("Using the pseudo embedder: its vectors carry no semantic meaning")
        client = genai.Client(
            api_key=settings.require_gemini_key(),
            http_options=types.HttpOptions(timeout=int(settings.request_timeout * 1000)),
        )
        return PseudoEmbedder(client, settings.pseudo_embedding_model, settings.pseudo_embedding_dimension)
    return SentenceTransformerEmbedder(settings.embedding_model)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Index a folder of PDF documents into Qdrant.")
    parser.add_argument("--folder", help="folder of source documents (default: $DOCS_FOLDER)")
    parser.add_argument("--embedder", choices=["semantic", "pseudo"], default="semantic")
    parser.add_argument("--delay", type=float, help="minimum seconds between upserts")
    return parser.parse_args(argv)


def main(argv=None):
    setup_logging()
    args = parse_args(argv)
    settings = Settings.from_env()

    folder = Path(args.folder or settings.docs_folder)
    files = list_documents(folder)
    logger.info(f"Found {len(files)} PDF files in {folder}: {', '.join(f.name for f in files)}")

    client = QdrantClient(
        url=settings.qdrant_url,
        api_key=settings.qdrant_api_key,
        timeout=int(settings.request_timeout),
    )
    try:
        job = IngestionJob(
            build_embedder(args.embedder, settings),
            client,
            settings.collection_name,
            chunk_size=settings.chunk_size,
            min_chunk_chars=settings.min_chunk_chars,
            max_stored_text=settings.max_stored_text,
            throttle=Throttle(settings.upsert_delay if args.delay is None else args.delay),
        )
        report = job.run(files)
    finally:
        client.close()

    return 1 if report.failed and not report.processed else 0


if __name__ == "__main__":
    raise SystemExit(main())
