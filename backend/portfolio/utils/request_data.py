from flask import request
from werkzeug.exceptions import BadRequest


def json_body():
    """The request's JSON object, or 400 when the body is not one."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Invalid request body")
    return data


def query_int(name, default):
    value = request.args.get(name)
    if value in (None, ""):
        return default
    try:
        return int(value)
    except ValueError:
        raise BadRequest(f"'{name}' must be an integer")
