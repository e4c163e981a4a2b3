# utils/request_utils.py
from flask import request

from utils.errors import BadRequest


def read_json(expect=(dict,)):
    """Request body as JSON; BadRequest when it is missing or malformed."""
    payload = request.get_json(force=True, silent=True)
    if payload is None or not isinstance(payload, expect):
        raise BadRequest("Invalid JSON")
    return payload
