import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Socket.IO listen address
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3001'))
    # Comma separated list, or '*' for any origin
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    ROOM_CODE_LENGTH = int(os.environ.get('ROOM_CODE_LENGTH', '6'))
    # Optional: python-socketio / engineio packet logging. 1 enables.
    SOCKETIO_LOGGER = os.environ.get('SOCKETIO_LOGGER', '0') == '1'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
