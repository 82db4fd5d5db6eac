from flask import Blueprint, current_app, g, jsonify, request
import traceback
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import RequestEntityTooLarge
from filedrop.observability.debug_log import log_debug
from filedrop.services.keys import build_key, clean_filename

upload_bp = Blueprint("upload", __name__)

STORE_EXTENSION = "filedrop.store"


def get_store():
    return current_app.extensions[STORE_EXTENSION]


@upload_bp.route("/upload", methods=["POST"], provide_automatic_options=False)
def upload_file():
    """
    Stream the multipart field `file` into the object store.

    200 {"success": true, "key": ...}
    400 when `file` is missing, a plain form field, or has no filename
    413 when the body exceeds MAX_CONTENT_LENGTH
    500 when parsing or the store write fails
    """
    try:
        f = request.files.get("file")
        log_debug(f"Upload request received: content_length={request.content_length}")

        if not isinstance(f, FileStorage) or not clean_filename(f.filename or ""):
            g.upload_outcome = "rejected"
            return jsonify({"success": False, "error": "No file provided"}), 400

        key = build_key(f.filename)
        g.upload_key = key
        get_store().put(key, f.stream, f.content_type or "")

        log_debug(f"Stored {key} ({f.content_type or 'no content type'})")
        g.upload_outcome = "stored"
        return jsonify({"success": True, "key": key})

    except RequestEntityTooLarge:
        g.upload_outcome = "too_large"
        log_debug(f"Rejected: body exceeds {current_app.config.get('MAX_CONTENT_LENGTH')} bytes")
        return jsonify({"success": False, "error": "File too large"}), 413

    except Exception as e:
        g.upload_outcome = "failed"
        log_debug(f"Upload failed: {e}\n{traceback.format_exc()}")
        current_app.logger.warning("upload failed: %s", e)
        return jsonify({"success": False, "error": str(e) or "Upload failed"}), 500
