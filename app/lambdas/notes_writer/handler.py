# app/lambdas/notes_writer/handler.py
import json
import logging
import os

from notesdb import MissingTableNameError, Note, NoteRepository, RepositoryError, ValidationError
from notesdb.clients import dynamodb_client
from notesdb.responses import created, error_response, request_id

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))

TABLE_NAME = os.environ.get("WRITER_TABLE_NAME", "")

repository = NoteRepository(dynamodb_client(), TABLE_NAME)


def _parse_note(raw_body):
    """
    Decode the request body into a Note.

    owner, title and message must be present and be strings. Empty
    title/message are accepted (the repository does not reject them)
    but logged, since an empty title collides with every other
    empty-title note of the same owner.
    """
    try:
        body = json.loads(raw_body or "")
    except json.JSONDecodeError as e:
        raise ValidationError(f"request body is not valid JSON: {e}") from e
    if not isinstance(body, dict):
        raise ValidationError("request body must be a JSON object")

    for field in ("owner", "title", "message"):
        if not isinstance(body.get(field), str):
            raise ValidationError(f"{field} is required and must be a string", field=field)

    if not body["title"] or not body["message"]:
        logger.warning("writing note with empty title or message for owner %r", body["owner"])

    return Note(owner=body["owner"], title=body["title"], message=body["message"])


def lambda_handler(event, context):
    """Create or overwrite a note. 201 with Location: /{owner} on success."""
    logger.info("Received event: %s", json.dumps(event))
    req_id = request_id(context)

    try:
        note = _parse_note(event.get("body"))
        owner = repository.put(note)
    except MissingTableNameError as e:
        logger.error("writer misconfigured: %s", e)
        return error_response(500, req_id, str(e))
    except ValidationError as e:
        logger.info("rejecting request: %s", e)
        return error_response(400, req_id, str(e))
    except RepositoryError as e:
        logger.error("client error: %s", e.client_message)
        return error_response(502, req_id, str(e))
    except Exception:
        logger.exception("error adding note")
        return error_response(500, req_id, "internal error")

    return created(f"/{owner}")
