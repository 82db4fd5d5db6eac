from __future__ import annotations

import json
import os
import shutil
import tempfile
from typing import BinaryIO

from filedrop.services.storage.base import ObjectStore, StoreWriteError

CHUNK_SIZE = 64 * 1024


class LocalObjectStore(ObjectStore):
    """
    Filesystem-backed store for local development.

    Each object is written to <root>/<key>; its content type goes into a
    <key>.meta.json sidecar next to it.
    """

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    @classmethod
    def from_env(cls) -> "LocalObjectStore":
        root = (os.getenv("LOCAL_STORE_DIR", "") or "").strip() or os.path.join("storage", "objects")
        return cls(root)

    def _path(self, key: str) -> str:
        path = os.path.abspath(os.path.join(self.root, key))
        if os.path.dirname(path) != self.root:
            raise StoreWriteError(f"Invalid key: {key!r}")
        return path

    def put(self, key: str, stream: BinaryIO, content_type: str = "") -> None:
        path = self._path(key)
        try:
            os.makedirs(self.root, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.root, prefix=".upload-")
            try:
                with os.fdopen(fd, "wb") as fh:
                    shutil.copyfileobj(stream, fh, CHUNK_SIZE)
                os.replace(tmp, path)
            except BaseException:
                os.unlink(tmp)
                raise
            with open(path + ".meta.json", "w", encoding="utf-8") as fh:
                json.dump({"content_type": content_type or ""}, fh)
        except OSError as e:
            raise StoreWriteError(f"Failed to write {key}: {e}") from e
