import fitz
import pytest

from documate.ingest import extract_pdf_text, list_documents


class TestListDocuments:
    def test_filters_by_extension_and_sorts(self, tmp_path):
        for name in ["b.PDF", "a.pdf", "notes.txt"]:
            (tmp_path / name).write_bytes(b"%PDF-1.4\n")
        (tmp_path / "nested.pdf").mkdir()

        files = list_documents(tmp_path)

        assert [f.name for f in files] == ["a.pdf", "b.PDF"]

    def test_missing_folder_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list_documents(tmp_path / "missing")


class TestExtractPdfText:
    def test_reads_every_page(self, tmp_path):
        path = tmp_path / "guide.pdf"
        doc = fitz.open()
        for text in ["Navigate to System Definition", "Open the Tables module"]:
            page = doc.new_page()
            page.insert_text((72, 72), text)
        doc.save(path)
        doc.close()

        text = extract_pdf_text(path)

        assert "Navigate to System Definition" in text
        assert "Open the Tables module" in text
        assert text.index("Navigate") < text.index("Tables module")

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not a pdf at all")

        with pytest.raises(Exception):
            extract_pdf_text(path)
