"""
Test suite for dependency factories.

System role: Verification of store wiring from settings
"""

from unittest.mock import MagicMock, patch

import pytest

from workflow_store.boundary.blob import GridFSBlobStore, InMemoryBlobStore, S3BlobStore
from workflow_store.boundary.db.CRUD import WorkflowInstanceCRUD
from workflow_store.configs import BlobStorageSettings, MongoDBSettings, Settings
from workflow_store.configs.base import BaseSettings
from workflow_store.core.exceptions import ConfigurationError
from workflow_store.dependencies import build_blob_store, build_workflow_instance_store


def _settings(**blob_options) -> Settings:
    return Settings(
        mongodb=MongoDBSettings(collection="Instances"),
        blob_storage=BlobStorageSettings(**blob_options),
    )


class TestBuildBlobStore:
    """Test suite for build_blob_store()."""

    def test_gridfs_backend_should_pair_bucket_with_collection(self) -> None:
        with patch(
            "workflow_store.boundary.blob.gridfs_blob_store.AsyncGridFSBucket"
        ) as bucket_cls:
            store = build_blob_store(_settings(backend="gridfs"), MagicMock())

        assert isinstance(store, GridFSBlobStore)
        assert store.bucket_name == "Instances_GridFs"
        assert bucket_cls.call_args.kwargs["bucket_name"] == "Instances_GridFs"

    def test_s3_backend_should_require_bucket(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            build_blob_store(_settings(backend="s3"), MagicMock())

        assert exc_info.value.details["setting"] == "s3_bucket"

    def test_s3_backend_should_build_s3_store(self) -> None:
        with patch("workflow_store.boundary.blob.s3_blob_store.boto3.client"):
            store = build_blob_store(
                _settings(backend="s3", s3_bucket="blobs"), MagicMock()
            )

        assert isinstance(store, S3BlobStore)

    def test_memory_backend_should_build_memory_store(self) -> None:
        store = build_blob_store(_settings(backend="memory"), MagicMock())

        assert isinstance(store, InMemoryBlobStore)


class TestBuildWorkflowInstanceStore:
    """Test suite for build_workflow_instance_store()."""

    def test_should_wire_collection_and_threshold(self) -> None:
        # Arrange
        database = MagicMock()
        settings = _settings(backend="memory", offload_threshold_bytes=2048)

        # Act
        store = build_workflow_instance_store(settings, database)

        # Assert
        assert isinstance(store, WorkflowInstanceCRUD)
        database.__getitem__.assert_called_with("Instances")
        assert store.codec.threshold_bytes == 2048
        assert isinstance(store.blob_store, InMemoryBlobStore)


class TestBlobStorageSettings:
    """Test suite for BlobStorageSettings."""

    def test_should_share_base_settings(self) -> None:
        """Test blob settings carry the common environment fields."""
        assert issubclass(BlobStorageSettings, BaseSettings)

        settings = BlobStorageSettings()

        assert settings.log_level == "INFO"
        assert settings.environment == "development"

    def test_should_read_prefixed_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("BLOB_STORAGE_BACKEND", "memory")
        monkeypatch.setenv("BLOB_STORAGE_OFFLOAD_THRESHOLD_BYTES", "2048")

        settings = BlobStorageSettings()

        assert settings.backend == "memory"
        assert settings.offload_threshold_bytes == 2048
