"""Tests for the local JSON-backed file store.

Run with: pytest tests/test_file_store.py -v
"""

import pytest

from content.stores.file_store import LocalFileStore
from core.domain.errors import FileRejectedError, StorageQuotaExceededError

PDF = b"%PDF-1.4 minimal document"


@pytest.fixture
def store(tmp_path):
    return LocalFileStore(tmp_path / "files.json", quota_bytes=64 * 1024)


class TestLocalFileStore:
    def test_upload_and_download(self, store):
        stored = store.upload(PDF, "manifesto.pdf", "application/pdf", "constitution", tags=("2024",))

        assert stored.size == len(PDF)
        assert stored.name.startswith("constitution_") and stored.name.endswith(".pdf")
        assert stored.storage_path == f"constitution/{stored.name}"
        assert stored.tags == ("2024",)

        meta, data = store.download(stored.id)
        assert data == PDF
        assert meta.download_count == 1
        assert store.get(stored.id).download_count == 1

    def test_list_by_category(self, store):
        store.upload(PDF, "a.pdf", "application/pdf", "constitution")
        store.upload(PDF, "b.pdf", "application/pdf", "voter-guide")

        assert [f.original_name for f in store.list_by_category("voter-guide")] == ["b.pdf"]

    def test_rejects_non_pdf(self, store):
        with pytest.raises(FileRejectedError):
            store.upload(b"hello", "notes.txt", "text/plain", "constitution")

    def test_rejects_oversized_file(self, tmp_path):
        store = LocalFileStore(tmp_path / "files.json", max_file_bytes=10)
        with pytest.raises(FileRejectedError):
            store.upload(PDF, "big.pdf", "application/pdf", "constitution")

    def test_quota_exceeded_leaves_store_unchanged(self, tmp_path):
        store = LocalFileStore(tmp_path / "files.json", quota_bytes=2000)
        store.upload(PDF, "a.pdf", "application/pdf", "constitution")

        with pytest.raises(StorageQuotaExceededError):
            store.upload(PDF * 60, "b.pdf", "application/pdf", "constitution")

        assert len(store.list_by_category("constitution")) == 1

    def test_delete(self, store):
        stored = store.upload(PDF, "a.pdf", "application/pdf", "constitution")

        assert store.delete(stored.id)
        assert not store.delete(stored.id)
        assert store.download(stored.id) is None

    def test_storage_info(self, store):
        assert store.storage_info()["used"] == 0
        store.upload(PDF, "a.pdf", "application/pdf", "constitution")

        info = store.storage_info()
        assert info["used"] > 0
        assert info["available"] == store.quota_bytes - info["used"]
