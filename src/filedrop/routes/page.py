from flask import Blueprint, send_from_directory
import os

page_bp = Blueprint("page", __name__)

FRONTEND_DIR = os.path.join(os.path.dirname(__file__), "..", "frontend")


@page_bp.route("/", methods=["GET"], provide_automatic_options=False)
def index():
    # conditional=False: the page is always returned with a 200
    return send_from_directory(FRONTEND_DIR, "index.html", mimetype="text/html", conditional=False)
