# app/notesdb/schema.py
"""Notes table definition, plus create/delete helpers for local stacks."""
import logging

from botocore.exceptions import BotoCoreError, ClientError

from .errors import MissingTableNameError, RepositoryError

logger = logging.getLogger(__name__)

KEY_SCHEMA = [
    {"AttributeName": "owner", "KeyType": "HASH"},
    {"AttributeName": "title", "KeyType": "RANGE"},
]

ATTRIBUTE_DEFINITIONS = [
    {"AttributeName": "owner", "AttributeType": "S"},
    {"AttributeName": "title", "AttributeType": "S"},
]

PROVISIONED_THROUGHPUT = {"ReadCapacityUnits": 10, "WriteCapacityUnits": 5}


def create_notes_table(client, table_name):
    """Create the notes table and block until DynamoDB reports it exists."""
    if not table_name:
        raise MissingTableNameError()

    logger.info("creating table %s", table_name)
    try:
        client.create_table(
            TableName=table_name,
            KeySchema=KEY_SCHEMA,
            AttributeDefinitions=ATTRIBUTE_DEFINITIONS,
            ProvisionedThroughput=PROVISIONED_THROUGHPUT,
        )
        client.get_waiter("table_exists").wait(TableName=table_name)
    except (ClientError, BotoCoreError) as e:
        raise RepositoryError(str(e)) from e


def delete_notes_table(client, table_name):
    if not table_name:
        raise MissingTableNameError()

    logger.info("deleting table %s", table_name)
    try:
        client.delete_table(TableName=table_name)
        client.get_waiter("table_not_exists").wait(TableName=table_name)
    except (ClientError, BotoCoreError) as e:
        raise RepositoryError(str(e)) from e
