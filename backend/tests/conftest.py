import os
import sys
import pytest

# Ensure the backend root (containing the `dilemma` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from dilemma import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = '*'
    ROOM_CODE_LENGTH = 6
    SOCKETIO_LOGGER = False
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def referee(flask_app):
    return flask_app.extensions['referee']


def _connect(flask_app):
    test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
    # Flush the 'connected' greeting
    test_client.get_received()
    return test_client


@pytest.fixture()
def sio_factory(flask_app):
    clients = []

    def make():
        test_client = _connect(flask_app)
        clients.append(test_client)
        return test_client

    yield make
    for test_client in clients:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def player_a(sio_factory):
    return sio_factory()


@pytest.fixture()
def player_b(sio_factory):
    return sio_factory()
