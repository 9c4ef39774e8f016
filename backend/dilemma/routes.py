from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


def _referee():
    return current_app.extensions['referee']


@main.route('/')
def index():
    return jsonify({'message': "Welcome to the Prisoner's Dilemma server!"})


@main.route('/health')
def health():
    return jsonify({'status': 'ok', 'rooms': len(_referee().store)})


@main.route('/rooms/<string:room_code>')
def get_room(room_code):
    """Snapshot of a live room. Pending choices stay hidden."""
    room = _referee().get_room(room_code)
    if room is None:
        return jsonify({'error': 'Room not found'}), 404
    return jsonify(room.to_dict())
