from __future__ import annotations

import os

from filedrop.services.storage.base import ObjectStore
from filedrop.services.storage.local import LocalObjectStore
from filedrop.services.storage.s3 import S3ObjectStore

BACKENDS = {
    "local": LocalObjectStore,
    "s3": S3ObjectStore,
}


def store_from_env() -> ObjectStore:
    name = (os.getenv("STORE_BACKEND", "") or "").strip().lower() or "local"
    backend = BACKENDS.get(name)
    if backend is None:
        raise RuntimeError(f"Unknown STORE_BACKEND {name!r} (expected one of: {', '.join(sorted(BACKENDS))})")
    return backend.from_env()
