# app/notesdb/clients.py
"""
boto3 client construction.

Lambda handlers call these once at cold start and pass the client
into whatever needs it.
"""
import logging
import os

import boto3
from botocore.config import Config

logger = logging.getLogger(__name__)

DYNAMODB_URL_OVERRIDE_ENV = "DYNAMODB_API_URL_OVERRIDE"

# Local stacks (LocalStack, DynamoDB Local) accept any static credentials.
LOCAL_REGION = "us-east-1"
LOCAL_CREDENTIALS = {"aws_access_key_id": "test", "aws_secret_access_key": "test"}

CLIENT_CONFIG = Config(connect_timeout=5, read_timeout=10)


def dynamodb_client(url_override=None):
    """
    Return a DynamoDB client.

    If url_override (or DYNAMODB_API_URL_OVERRIDE) is set, assume a local
    service: point the client there with static test credentials.
    """
    url_override = url_override or os.environ.get(DYNAMODB_URL_OVERRIDE_ENV, "")
    if not url_override:
        return boto3.client("dynamodb", config=CLIENT_CONFIG)

    logger.info("Overriding default DynamoDB API URI: %s", url_override)
    return boto3.client(
        "dynamodb",
        endpoint_url=url_override,
        region_name=LOCAL_REGION,
        config=CLIENT_CONFIG,
        **LOCAL_CREDENTIALS,
    )


def codedeploy_client():
    return boto3.client("codedeploy", config=CLIENT_CONFIG)
