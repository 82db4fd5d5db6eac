import uuid
import time
from flask import current_app, g, request

# set by routes.upload; logged only when present
UPLOAD_FIELDS = ("upload_key", "upload_outcome")

def start_request():
    g.request_id = uuid.uuid4().hex[:12]
    g.start_time = time.time()

def end_request(response):
    duration_ms = int((time.time() - g.get("start_time", time.time())) * 1000)

    log = {
        "request_id": g.get("request_id", "unknown"),
        "method": request.method,
        "path": request.path,
        "status": response.status_code,
        "duration_ms": duration_ms,
        "content_length": request.content_length,
        "content_type": request.mimetype or None,
    }
    for field in UPLOAD_FIELDS:
        value = g.get(field)
        if value is not None:
            log[field] = value

    current_app.logger.info(f"[REQUEST] {log}")
    return response
