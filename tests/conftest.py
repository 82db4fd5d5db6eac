import pytest

from filedrop.app import create_app


class RecordingStore:
    """In-memory store that keeps every write, in order."""

    def __init__(self):
        self.puts = []
        self.objects = {}

    def put(self, key, stream, content_type=""):
        data = stream.read()
        self.puts.append((key, data, content_type))
        self.objects[key] = (data, content_type)


class FailingStore:
    def __init__(self, exc):
        self.exc = exc

    def put(self, key, stream, content_type=""):
        raise self.exc


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def make_app(tmp_path):
    def _make(store, **config):
        cfg = {"TESTING": True, "DEBUG_LOG_DIR": str(tmp_path / "logs")}
        cfg.update(config)
        return create_app(store=store, config=cfg)

    return _make


@pytest.fixture
def app(make_app, store):
    return make_app(store)


@pytest.fixture
def client(app):
    return app.test_client()
