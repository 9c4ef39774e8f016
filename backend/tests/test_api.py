def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_health_counts_rooms(client, referee):
    assert client.get('/health').get_json() == {'status': 'ok', 'rooms': 0}
    referee.create_room('sid-a')
    assert client.get('/health').get_json()['rooms'] == 1


def test_room_snapshot(client, referee):
    room = referee.create_room('sid-a')
    referee.join_room(room.code, 'sid-b')
    res = client.get(f'/rooms/{room.code.lower()}')
    assert res.status_code == 200
    data = res.get_json()
    assert data['code'] == room.code
    assert data['players'] == ['sid-a', 'sid-b']
    assert data['scores'] == {'sid-a': 0, 'sid-b': 0}
    assert data['round'] == 1
    assert data['status'] == 'playing'
    assert 'choices' not in data


def test_room_snapshot_unknown(client):
    res = client.get('/rooms/NOPE00')
    assert res.status_code == 404
    assert res.get_json() == {'error': 'Room not found'}
