"""Local file store: one JSON array on disk, file bytes inlined as base64.

Meant for small deployments without object storage. Capacity is bounded by
``quota_bytes`` measured on the serialized JSON document.
"""

import base64
import dataclasses
import json
import logging
import threading
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path

from core.domain.errors import FileRejectedError, StorageQuotaExceededError
from content.domain import StoredFile

logger = logging.getLogger(__name__)

DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024
DEFAULT_MAX_FILE_BYTES = 50 * 1024 * 1024
DEFAULT_ALLOWED_TYPES = frozenset({"application/pdf"})


class LocalFileStore:
    def __init__(
        self,
        path: Path,
        quota_bytes: int = DEFAULT_QUOTA_BYTES,
        max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
        allowed_types: frozenset[str] = DEFAULT_ALLOWED_TYPES,
    ) -> None:
        self.path = Path(path)
        self.quota_bytes = quota_bytes
        self.max_file_bytes = max_file_bytes
        self.allowed_types = allowed_types
        self._lock = threading.Lock()

    def _read(self) -> list[StoredFile]:
        if not self.path.exists():
            return []
        raw = json.loads(self.path.read_text(encoding="utf-8") or "[]")
        return [StoredFile(**{**entry, "tags": tuple(entry.get("tags", ()))}) for entry in raw]

    def _serialize(self, files: list[StoredFile]) -> str:
        return json.dumps([dataclasses.asdict(f) for f in files])

    def _write(self, files: list[StoredFile]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self._serialize(files), encoding="utf-8")

    def validate(self, size: int, content_type: str) -> None:
        if content_type not in self.allowed_types:
            raise FileRejectedError("Only PDF files are allowed")
        if size > self.max_file_bytes:
            raise FileRejectedError("File size must be less than 50MB")

    def upload(
        self,
        data: bytes,
        original_name: str,
        content_type: str,
        category: str,
        subcategory: str = "",
        description: str = "",
        author: str = "UFA Admin",
        tags: tuple[str, ...] = (),
    ) -> StoredFile:
        """Store ``data`` and return its metadata.

        Raises:
            FileRejectedError: Wrong content type or file too large.
            StorageQuotaExceededError: The store would exceed its quota.
        """
        self.validate(len(data), content_type)
        file_id = uuid.uuid4().hex
        extension = original_name.rsplit(".", 1)[-1] if "." in original_name else "bin"
        name = f"{category}_{int(time.time() * 1000)}.{extension}"
        now = datetime.now(timezone.utc).isoformat()
        stored = StoredFile(
            id=file_id,
            name=name,
            original_name=original_name,
            size=len(data),
            type=content_type,
            download_url=f"#download-{file_id}",
            storage_path=f"{category}/{name}",
            category=category,
            subcategory=subcategory,
            description=description,
            author=author,
            tags=tuple(tags),
            upload_date=now,
            last_modified=now,
            file_data=base64.b64encode(data).decode("ascii"),
        )
        with self._lock:
            files = self._read()
            files.append(stored)
            if len(self._serialize(files).encode("utf-8")) > self.quota_bytes:
                raise StorageQuotaExceededError()
            self._write(files)
        logger.info("stored file %s (%d bytes) in %s", original_name, len(data), category)
        return stored

    def get(self, file_id: str) -> StoredFile | None:
        with self._lock:
            return next((f for f in self._read() if f.id == file_id), None)

    def list_by_category(self, category: str) -> list[StoredFile]:
        with self._lock:
            files = [f for f in self._read() if f.category == category]
        return sorted(files, key=lambda f: f.upload_date, reverse=True)

    def download(self, file_id: str) -> tuple[StoredFile, bytes] | None:
        """Return metadata and bytes, counting the download."""
        with self._lock:
            files = self._read()
            for index, stored in enumerate(files):
                if stored.id == file_id:
                    stored = dataclasses.replace(stored, download_count=stored.download_count + 1)
                    files[index] = stored
                    self._write(files)
                    return stored, base64.b64decode(stored.file_data)
        return None

    def delete(self, file_id: str) -> bool:
        with self._lock:
            files = self._read()
            remaining = [f for f in files if f.id != file_id]
            if len(remaining) == len(files):
                return False
            self._write(remaining)
        logger.info("deleted stored file %s", file_id)
        return True

    def storage_info(self) -> dict[str, float]:
        with self._lock:
            used = len(self._serialize(self._read()).encode("utf-8")) if self.path.exists() else 0
        return {
            "used": used,
            "available": max(self.quota_bytes - used, 0),
            "percentage": round(used / self.quota_bytes * 100, 2) if self.quota_bytes else 0.0,
        }
