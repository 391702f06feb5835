"""DocuMate: retrieval-augmented question answering over ingested PDF documentation."""

__version__ = "0.1.0"
