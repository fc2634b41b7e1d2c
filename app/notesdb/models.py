# app/notesdb/models.py
"""Note record and its DynamoDB attribute-value marshalling."""
from dataclasses import asdict, dataclass, field
from decimal import Decimal, DecimalException
from typing import Any, Dict, List

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from .errors import RepositoryError

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()

AttributeMap = Dict[str, Dict[str, Any]]


def marshal(values: Dict[str, Any]) -> AttributeMap:
    """Plain dict -> DynamoDB attribute-value map."""
    return {k: _serializer.serialize(v) for k, v in values.items()}


def unmarshal(item: AttributeMap) -> Dict[str, Any]:
    """DynamoDB attribute-value map -> plain dict."""
    return {k: _deserializer.deserialize(v) for k, v in item.items()}


@dataclass
class Note:
    owner: str
    title: str
    message: str = ""
    timestamp: int = 0

    def key(self) -> AttributeMap:
        return marshal({"owner": self.owner, "title": self.title})

    def to_item(self) -> AttributeMap:
        return marshal(self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_item(cls, item: AttributeMap) -> "Note":
        """
        Decode one DynamoDB item.

        owner, title and message must be strings; timestamp must be a
        number when present and defaults to 0. Anything else is a
        RepositoryError, since the item came from the store.
        """
        try:
            values = unmarshal(item)
        except (TypeError, ValueError, AttributeError, DecimalException) as e:
            raise RepositoryError(f"undecodable item {item!r}: {e}") from e

        for name in ("owner", "title", "message"):
            if not isinstance(values.get(name), str):
                raise RepositoryError(f"item attribute {name!r} is missing or not a string")

        timestamp = values.get("timestamp", 0)
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, Decimal)):
            raise RepositoryError("item attribute 'timestamp' is not a number")
        try:
            timestamp = int(timestamp)
        except (ValueError, OverflowError) as e:
            raise RepositoryError(f"item attribute 'timestamp' is not an integer: {e}") from e

        return cls(
            owner=values["owner"],
            title=values["title"],
            message=values["message"],
            timestamp=timestamp,
        )

    @classmethod
    def from_items(cls, items: List[AttributeMap]) -> List["Note"]:
        return [cls.from_item(item) for item in items]


@dataclass
class GetAllNotesResponse:
    notes: List[Note] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"notes": [n.to_dict() for n in self.notes]}
