# app/notesdb/responses.py
"""API Gateway proxy response builders."""
import json
from http import HTTPStatus

JSON_HEADERS = {"Content-Type": "application/json"}


def json_response(status_code, body, headers=None):
    return {
        "statusCode": status_code,
        "headers": {**JSON_HEADERS, **(headers or {})},
        "body": json.dumps(body),
    }


def created(location):
    return {
        "statusCode": 201,
        "headers": {"Location": location},
        "body": "",
    }


def error_body(status_code, request_id=None, message=None):
    """
    JSON error document: request_id, error_type, status_code, message.

    error_type is the HTTP reason phrase. Empty fields are left out.
    """
    body = {
        "request_id": request_id,
        "error_type": HTTPStatus(status_code).phrase,
        "status_code": int(status_code),
        "message": message,
    }
    return {k: v for k, v in body.items() if v}


def error_response(status_code, request_id=None, message=None):
    return json_response(status_code, error_body(status_code, request_id, message))


def request_id(context):
    """The Lambda request id, or None outside Lambda (tests, local runs)."""
    return getattr(context, "aws_request_id", None)
