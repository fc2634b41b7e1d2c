# app/notesdb/repository.py
"""
Data access for notes stored in DynamoDB.

The repository talks to the low-level boto3 DynamoDB client, but only
through the one method each operation needs (see the *API protocols
below), so tests can hand it a small fake instead of a real client.
"""
import logging
import time
from typing import Any, Callable, Dict, List, Protocol, Tuple, runtime_checkable

from boto3.dynamodb.conditions import ConditionExpressionBuilder, Key
from botocore.exceptions import BotoCoreError, ClientError

from .errors import MissingTableNameError, RepositoryError, ValidationError
from .models import AttributeMap, Note, marshal

logger = logging.getLogger(__name__)

TABLE_SCAN_LIMIT = 25
TABLE_QUERY_LIMIT = 25


@runtime_checkable
class DynamoUpdateItemAPI(Protocol):
    def update_item(self, **kwargs: Any) -> Dict[str, Any]: ...


@runtime_checkable
class DynamoScanAPI(Protocol):
    def scan(self, **kwargs: Any) -> Dict[str, Any]: ...


@runtime_checkable
class DynamoQueryAPI(Protocol):
    def query(self, **kwargs: Any) -> Dict[str, Any]: ...


def build_update_expression(values: Dict[str, Any]) -> Tuple[str, Dict[str, str], AttributeMap]:
    """
    Build a SET update expression for the given attribute values.

    Every attribute goes through a name placeholder, since some of ours
    (timestamp) are DynamoDB reserved words.
    """
    names = {f"#{name}": name for name in values}
    clauses = [f"#{name} = :{name}" for name in values]
    expr_values = marshal({f":{name}": value for name, value in values.items()})
    return "SET " + ", ".join(clauses), names, expr_values


def build_owner_key_condition(owner: str) -> Tuple[str, Dict[str, str], AttributeMap]:
    built = ConditionExpressionBuilder().build_expression(
        Key("owner").eq(owner), is_key_condition=True
    )
    return (
        built.condition_expression,
        built.attribute_name_placeholders,
        marshal(built.attribute_value_placeholders),
    )


class NoteRepository:
    """Reads and writes Note records in a single DynamoDB table."""

    def __init__(self, api, table_name: str, clock: Callable[[], float] = time.time):
        self.api = api
        self.table_name = table_name
        self.clock = clock

    def _require_table(self):
        if not self.table_name:
            raise MissingTableNameError()

    def put(self, note: Note) -> str:
        """
        Upsert a note by (owner, title), setting message and a fresh timestamp.

        Returns the note's owner. There is no existence check: writing an
        existing key overwrites message and timestamp.
        """
        self._require_table()

        note.timestamp = int(self.clock())
        update, names, values = build_update_expression(
            {"message": note.message, "timestamp": note.timestamp}
        )
        request = {
            "TableName": self.table_name,
            "Key": note.key(),
            "UpdateExpression": update,
            "ExpressionAttributeNames": names,
            "ExpressionAttributeValues": values,
            "ReturnValues": "UPDATED_NEW",
        }

        logger.info("writing %s to %s", note, self.table_name)
        try:
            output = self.api.update_item(**request)
        except (ClientError, BotoCoreError) as e:
            logger.error("update_item failed: %s", e)
            raise RepositoryError(str(e)) from e
        logger.debug("update_item output: %s", output)
        return note.owner

    def scan(self) -> List[Note]:
        """Return up to TABLE_SCAN_LIMIT notes in store order. No continuation."""
        self._require_table()

        logger.info("scanning table %s (limit: %d)", self.table_name, TABLE_SCAN_LIMIT)
        try:
            output = self.api.scan(TableName=self.table_name, Limit=TABLE_SCAN_LIMIT)
        except (ClientError, BotoCoreError) as e:
            logger.error("scan failed: %s", e)
            raise RepositoryError(str(e)) from e

        logger.info("scanned %d items", output.get("ScannedCount", 0))
        return Note.from_items(output.get("Items", []))

    def query_by_owner(self, owner: str) -> List[Note]:
        """Return up to TABLE_QUERY_LIMIT notes whose partition key is owner."""
        self._require_table()
        if not owner:
            raise ValidationError("owner must be provided", field="owner")

        condition, names, values = build_owner_key_condition(owner)
        logger.info("querying for owner %r (limit: %d)", owner, TABLE_QUERY_LIMIT)
        try:
            output = self.api.query(
                TableName=self.table_name,
                Limit=TABLE_QUERY_LIMIT,
                KeyConditionExpression=condition,
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("query failed: %s", e)
            raise RepositoryError(str(e)) from e

        logger.info("scanned %d items", output.get("ScannedCount", 0))
        return Note.from_items(output.get("Items", []))
