# tests/conftest.py
"""Shared fixtures: an in-memory stand-in for the DynamoDB client."""
import re

import pytest
from botocore.exceptions import ClientError

from notesdb.models import unmarshal


def _client_error(operation, message, code="ValidationException"):
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeDynamoDB:
    """
    Just enough of the low-level DynamoDB client for the notes table:
    update_item with a SET expression, scan, and query on owner equality.
    Items are stored as attribute-value maps keyed by (owner, title).
    """

    def __init__(self):
        self.items = {}
        self.calls = []

    def _key(self, operation, key):
        plain = unmarshal(key)
        for name in ("owner", "title"):
            if not plain.get(name):
                raise _client_error(
                    operation,
                    "One or more parameter values are not valid. "
                    "The AttributeValue for a key attribute cannot contain an empty string value.",
                )
        return plain["owner"], plain["title"]

    def update_item(self, **kwargs):
        self.calls.append(("update_item", kwargs))
        key = self._key("UpdateItem", kwargs["Key"])
        item = dict(self.items.get(key, kwargs["Key"]))

        names = kwargs["ExpressionAttributeNames"]
        values = kwargs["ExpressionAttributeValues"]
        assignments = kwargs["UpdateExpression"][len("SET "):]
        for clause in assignments.split(","):
            name, value = (part.strip() for part in clause.split("="))
            item[names[name]] = values[value]

        self.items[key] = item
        return {"Attributes": {k: v for k, v in item.items() if k not in ("owner", "title")}}

    def scan(self, **kwargs):
        self.calls.append(("scan", kwargs))
        items = list(self.items.values())[: kwargs["Limit"]]
        return {"Items": items, "Count": len(items), "ScannedCount": len(items)}

    def query(self, **kwargs):
        self.calls.append(("query", kwargs))
        match = re.fullmatch(r"(#\w+) = (:\w+)", kwargs["KeyConditionExpression"])
        attribute = kwargs["ExpressionAttributeNames"][match.group(1)]
        wanted = kwargs["ExpressionAttributeValues"][match.group(2)]
        items = [i for i in self.items.values() if i.get(attribute) == wanted]
        items = items[: kwargs["Limit"]]
        return {"Items": items, "Count": len(items), "ScannedCount": len(items)}


@pytest.fixture()
def fake_dynamodb():
    return FakeDynamoDB()
