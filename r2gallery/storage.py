# r2gallery/storage.py
from functools import lru_cache
from typing import Iterable, List, Optional
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from r2gallery import config
from r2gallery.data_store import demo_objects
from r2gallery.models import ObjectEntry

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The storage backend could not produce a listing."""


class ObjectStore:
    """Read-only view of one bucket."""

    def list_objects(self) -> List[ObjectEntry]:
        raise NotImplementedError


class S3ObjectStore(ObjectStore):
    """
    Bucket listing over the S3 API (Cloudflare R2 or any S3-compatible endpoint).
    The whole bucket is listed with a single call; no continuation handling.
    """

    def __init__(self, bucket: str, client=None, endpoint_url: Optional[str] = None,
                 region_name: Optional[str] = None) -> None:
        self.bucket = bucket
        # botocore clients are thread-safe, one per process is enough
        self.client = client or boto3.client("s3", endpoint_url=endpoint_url, region_name=region_name)

    def list_objects(self) -> List[ObjectEntry]:
        try:
            response = self.client.list_objects_v2(Bucket=self.bucket)
        except (ClientError, BotoCoreError) as e:
            logger.exception("Error listing objects in bucket %s", self.bucket)
            raise StorageError(f"Failed to list bucket {self.bucket}") from e

        return [
            ObjectEntry(key=obj["Key"], size=obj.get("Size"), last_modified=obj.get("LastModified"))
            for obj in response.get("Contents", [])
        ]


class MemoryObjectStore(ObjectStore):
    """In-memory bucket for local runs and tests."""

    def __init__(self, entries: Optional[Iterable[ObjectEntry]] = None) -> None:
        self._entries = list(entries) if entries is not None else demo_objects()

    def list_objects(self) -> List[ObjectEntry]:
        return list(self._entries)


def build_store(backend: str = None) -> ObjectStore:
    backend = backend or config.STORAGE_BACKEND
    if backend == "memory":
        return MemoryObjectStore()
    if backend == "s3":
        return S3ObjectStore(config.BUCKET_NAME, endpoint_url=config.S3_ENDPOINT_URL,
                             region_name=config.AWS_REGION)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


@lru_cache(maxsize=1)
def get_store() -> ObjectStore:
    return build_store()
