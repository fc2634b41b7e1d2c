# app/lambdas/notes_reader/handler.py
import json
import logging
import os

from notesdb import GetAllNotesResponse, MissingTableNameError, NoteRepository, RepositoryError, ValidationError
from notesdb.clients import dynamodb_client
from notesdb.responses import error_response, json_response, request_id

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))

TABLE_NAME = os.environ.get("READER_TABLE_NAME", "")

repository = NoteRepository(dynamodb_client(), TABLE_NAME)


def _owner_from_path(event):
    """None when the route has no {owner} segment."""
    params = event.get("pathParameters") or {}
    return params.get("owner")


def lambda_handler(event, context):
    """
    GET /notes scans the table; GET /notes/{owner} queries by owner.
    Either way at most 25 notes come back.
    """
    logger.info("Received event: %s", json.dumps(event))
    req_id = request_id(context)

    owner = _owner_from_path(event)
    try:
        if owner is not None:
            logger.info("querying for owner: %r", owner)
            notes = repository.query_by_owner(owner)
        else:
            logger.info("scanning database")
            notes = repository.scan()
    except MissingTableNameError as e:
        logger.error("reader misconfigured: %s", e)
        return error_response(500, req_id, str(e))
    except ValidationError as e:
        return error_response(400, req_id, str(e))
    except RepositoryError as e:
        logger.error("client error: %s", e.client_message)
        return error_response(502, req_id, str(e))
    except Exception:
        logger.exception("error reading notes")
        return error_response(500, req_id, "internal error")

    return json_response(200, GetAllNotesResponse(notes=notes).to_dict())
