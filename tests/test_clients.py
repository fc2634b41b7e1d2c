# tests/test_clients.py
"""Unit tests for boto3 client construction."""
import os
from unittest.mock import patch

from notesdb import clients


class TestDynamodbClient:
    @patch("boto3.client")
    def test_default_endpoint(self, mock_client):
        with patch.dict(os.environ, {}, clear=True):
            clients.dynamodb_client()

        mock_client.assert_called_once_with("dynamodb", config=clients.CLIENT_CONFIG)

    @patch("boto3.client")
    def test_env_override_targets_local_stack(self, mock_client):
        with patch.dict(os.environ, {"DYNAMODB_API_URL_OVERRIDE": "http://localhost:4566"}):
            clients.dynamodb_client()

        mock_client.assert_called_once_with(
            "dynamodb",
            endpoint_url="http://localhost:4566",
            region_name="us-east-1",
            config=clients.CLIENT_CONFIG,
            aws_access_key_id="test",
            aws_secret_access_key="test",
        )

    @patch("boto3.client")
    def test_explicit_override(self, mock_client):
        with patch.dict(os.environ, {}, clear=True):
            clients.dynamodb_client("http://localhost:8000")

        assert mock_client.call_args.kwargs["endpoint_url"] == "http://localhost:8000"


class TestCodedeployClient:
    @patch("boto3.client")
    def test_builds_client(self, mock_client):
        clients.codedeploy_client()
        mock_client.assert_called_once_with("codedeploy", config=clients.CLIENT_CONFIG)
