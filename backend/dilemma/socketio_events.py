from flask import current_app, request
from flask_socketio import close_room, emit, join_room
from dilemma import socketio
from dilemma.services.games import ChoiceSubmission, JoinError, normalize_room_code

NAMESPACE = '/'


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _referee():
    return current_app.extensions['referee']


def handle_connect():
    current_app.logger.info(f"[connect] sid={_get_sid()}")
    emit('connected', {'sid': _get_sid()})


def handle_create_room(data=None):
    sid = _get_sid()
    room = _referee().create_room(sid)
    join_room(room.code)
    current_app.logger.info(f"[create-room] sid={sid} room={room.code}")
    emit('room-created', room.code)


def handle_join_room(data=None):
    sid = _get_sid()
    raw_code = data.get('roomId') if isinstance(data, dict) else data
    room_code = normalize_room_code(raw_code)
    try:
        room = _referee().join_room(room_code, sid)
    except JoinError as exc:
        current_app.logger.info(f"[join-room] sid={sid} room={room_code} rejected: {exc.message}")
        emit('join-error', exc.message)
        return
    join_room(room.code)
    current_app.logger.info(f"[join-room] sid={sid} room={room.code} players={len(room.players)}")
    emit('room-ready', list(room.players), to=room.code)


def handle_player_choice(data=None):
    sid = _get_sid()
    submission = ChoiceSubmission.from_payload(data, default_player_id=sid)
    if submission is None:
        current_app.logger.warning(f"[player-choice] sid={sid} ignored malformed payload {data!r}")
        return
    result = _referee().submit_choice(submission)
    if result is None:
        return
    current_app.logger.info(f"[round] room={result.room_code} round={result.round} scores={result.scores}")
    emit('round-result', result.to_dict(), to=result.room_code)
    if result.game_over:
        current_app.logger.info(f"[game-over] room={result.room_code} scores={result.scores}")
        emit('game-over', dict(result.scores), to=result.room_code)
        close_room(result.room_code)


def handle_disconnect(reason=None):
    sid = _get_sid()
    for departure in _referee().disconnect(sid):
        current_app.logger.info(
            f"[disconnect] sid={sid} left room={departure.room_code} players_left={len(departure.remaining)}"
        )
        if departure.room_closed:
            current_app.logger.info(f"[disconnect] removed empty room {departure.room_code}")
            continue
        for survivor in departure.remaining:
            socketio.emit('player-disconnected', sid, to=survivor, namespace=NAMESPACE)


def handle_error(exc):
    event = getattr(request, 'event', None) or {}
    current_app.logger.exception(f"[socket-error] sid={_get_sid()} event={event.get('message')}: {exc}")


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the default namespace."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('create-room', handle_create_room, namespace=NAMESPACE)
    socketio.on_event('join-room', handle_join_room, namespace=NAMESPACE)
    socketio.on_event('player-choice', handle_player_choice, namespace=NAMESPACE)
    socketio.on_error_default(handle_error)
