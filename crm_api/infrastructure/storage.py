"""Azure Blob Storage access for user avatars."""

from __future__ import annotations

import logging
from functools import lru_cache

from azure.core.exceptions import ResourceExistsError
from azure.storage.blob import BlobServiceClient, ContainerClient, ContentSettings

from crm_api.config import get_settings

logger = logging.getLogger(__name__)


class StorageConfigurationError(RuntimeError):
    """Blob storage is not configured, so uploads cannot be served."""


@lru_cache
def _avatar_container() -> ContainerClient:
    settings = get_settings()
    connection_string = settings.azure_storage_connection_string
    container_name = settings.azure_storage_container_name
    if not connection_string or not container_name:
        raise StorageConfigurationError(
            "AZURE_STORAGE_CONNECTION_STRING and AZURE_STORAGE_CONTAINER_NAME are required"
        )

    container = BlobServiceClient.from_connection_string(connection_string).get_container_client(
        container_name
    )
    try:
        container.create_container()
        logger.info("Created blob container '%s'", container_name)
    except ResourceExistsError:
        pass
    return container


def upload_blob(blob_path: str, data: bytes, *, content_type: str | None = None) -> str:
    """Store ``data`` under ``blob_path``, replacing any previous blob, and return its URL."""

    blob_client = _avatar_container().get_blob_client(blob_path)
    blob_client.upload_blob(
        data,
        overwrite=True,
        content_settings=ContentSettings(content_type=content_type) if content_type else None,
    )
    return blob_client.url


__all__ = ["StorageConfigurationError", "upload_blob"]
