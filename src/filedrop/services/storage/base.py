from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable


class StoreWriteError(RuntimeError):
    pass


@runtime_checkable
class ObjectStore(Protocol):
    """
    Write-only view of a key-value blob store.

    `stream` is read to EOF and never buffered whole; `content_type` is kept
    as object metadata and may be empty.
    """

    def put(self, key: str, stream: BinaryIO, content_type: str = "") -> None: ...
