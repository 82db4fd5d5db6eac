from __future__ import annotations

import os
from typing import Any, BinaryIO, Dict, Optional

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from filedrop.services.storage.base import ObjectStore, StoreWriteError


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name, default) or "").strip()


class S3ObjectStore(ObjectStore):
    """
    AWS S3 backend.

    Uses boto3 credential resolution; no access keys are read here.

    Required env:
      - S3_BUCKET

    Optional env:
      - S3_PREFIX (e.g. "uploads/" or "")
      - AWS_REGION or AWS_DEFAULT_REGION
    """

    def __init__(self, bucket: str, prefix: str = "", region: Optional[str] = None, client: Any = None):
        bucket = (bucket or "").strip()
        if not bucket:
            raise RuntimeError("S3_BUCKET is required for the s3 store backend")

        prefix = (prefix or "").strip()
        if prefix and not prefix.endswith("/"):
            prefix = prefix + "/"

        self.bucket = bucket
        self.prefix = prefix

        if client is None:
            cfg = Config(region_name=(region or None))
            client = boto3.client("s3", config=cfg)
        self.s3 = client

    @classmethod
    def from_env(cls) -> "S3ObjectStore":
        bucket = _env("S3_BUCKET")
        prefix = _env("S3_PREFIX", "")
        region = _env("AWS_REGION") or _env("AWS_DEFAULT_REGION") or ""
        return cls(bucket=bucket, prefix=prefix, region=region or None)

    def _key(self, key: str) -> str:
        key = (key or "").lstrip("/")
        if self.prefix:
            return f"{self.prefix}{key}"
        return key

    def put(self, key: str, stream: BinaryIO, content_type: str = "") -> None:
        extra: Dict[str, Any] = {}
        if content_type:
            extra["ContentType"] = content_type
        # upload_fileobj reads the stream in parts (multipart above 8 MB)
        try:
            self.s3.upload_fileobj(stream, self.bucket, self._key(key), ExtraArgs=extra or None)
        except (S3UploadFailedError, BotoCoreError, ClientError) as e:
            raise StoreWriteError(str(e)) from e
