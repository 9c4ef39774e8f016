from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if not value or value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    verbose = bool(flask_app.config.get('SOCKETIO_LOGGER'))
    socketio.init_app(
        flask_app,
        cors_allowed_origins=allowed_origins,
        logger=verbose,
        engineio_logger=verbose,
    )

    # Each app owns its rooms; socket handlers reach them via current_app
    from dilemma.services.games import Referee, RoomStore
    flask_app.extensions['referee'] = Referee(
        RoomStore(code_length=flask_app.config.get('ROOM_CODE_LENGTH', 6))
    )

    from dilemma.routes import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from dilemma.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app
