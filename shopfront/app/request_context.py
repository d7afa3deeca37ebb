import uuid

from flask import Response, current_app, g, request

REQUEST_ID_HEADER = "X-Request-ID"


def init_request_id() -> str:
    rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    g.request_id = rid
    return rid


def log_request(response: Response) -> Response:
    """Mirror the request id in the response and write one access line."""
    rid = getattr(g, "request_id", None)
    if rid:
        response.headers[REQUEST_ID_HEADER] = rid
    current_app.logger.info(
        "%s %s %s request_id=%s", request.method, request.path, response.status_code, rid
    )
    return response
