import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shopfront.app.config import Config
from shopfront.app.factory import create_app


class TestConfig(Config):
    __test__ = False

    TESTING = True
    SECRET_KEY = "test-secret"


class RecordingRenderer:
    """Stand-in renderer that remembers every render call."""

    def __init__(self):
        self.calls = []
        self.verified = []

    def render(self, name, context):
        self.calls.append((name, dict(context)))
        return f"<title>{context['page_title']}</title><nav>{context['path']}</nav>".encode("utf-8")

    def verify(self, names):
        self.verified.extend(names)


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def recorder():
    return RecordingRenderer()


@pytest.fixture()
def recording_client(recorder):
    app = create_app(TestConfig, renderer=recorder)
    with app.test_client() as client:
        yield client
