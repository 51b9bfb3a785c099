from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

INTERNAL_SERVER_ERROR_BODY = {
    "type": "about:blank",
    "title": "Internal Server Error",
    "status": 500,
}


def handle_error(error: Exception):
    # HTTP errors raised by Flask or werkzeug keep their own response.
    if isinstance(error, HTTPException):
        return error

    current_app.logger.exception("Unhandled error: %s", error)
    response = jsonify(INTERNAL_SERVER_ERROR_BODY)
    response.status_code = 500
    response.content_type = "application/problem+json"
    return response


def register_error_handlers(app) -> None:
    app.register_error_handler(Exception, handle_error)
