from flask import Flask, jsonify
from filedrop.config import load_config, port
from filedrop.observability.request_context import start_request, end_request
from filedrop.routes.page import page_bp
from filedrop.routes.upload import upload_bp, STORE_EXTENSION
from filedrop.wrappers import UploadRequest

def create_app(store=None, config=None):
    # the page is served by routes.page; no generic static route
    app = Flask(__name__, static_folder=None)
    app.request_class = UploadRequest
    app.config.update(load_config())
    if config:
        app.config.update(config)

    if store is None:
        from filedrop.services.storage.factory import store_from_env
        store = store_from_env()
    app.extensions[STORE_EXTENSION] = store

    app.register_blueprint(page_bp)
    app.register_blueprint(upload_bp)

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(_e):
        return jsonify({"error": "Not found"}), 404

    @app.before_request
    def _before():
        start_request()

    @app.after_request
    def _after(response):
        return end_request(response)

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=port())
