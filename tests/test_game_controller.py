"""
Testing the HTTP endpoints.
"""

import json

from wordle_game import create_app
from wordle_game.services.game_engine import GameEngine
from wordle_game.services.store import HISTORY_KEY, MemoryStore
from wordle_game.services.word_provider import WordProvider

from .conftest import WORDS


def type_via_api(client, word):
    for letter in word:
        response = client.post('/api/letter', json={'letter': letter})
        assert response.status_code == 200
    return response


def test_initial_state(client):
    response = client.get('/api/state')
    assert response.status_code == 200

    data = response.get_json()
    assert data['success'] is True
    state = data['state']
    assert state['current_row'] == 0
    assert state['max_rows'] == 6
    assert state['word_length'] == 5
    assert state['target_word'] is None
    assert state['board'] == []
    assert set(state['keyboard'].values()) == {'UNUSED'}


def test_typing_letters(client):
    data = type_via_api(client, "cra").get_json()
    assert data['state']['active_guess'] == "CRA"

    data = client.delete('/api/letter').get_json()
    assert data['state']['active_guess'] == "CR"


def test_letter_is_required(client):
    response = client.post('/api/letter', json={})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Letter is required'


def test_incomplete_guess_rejected(client):
    type_via_api(client, "CRA")
    response = client.post('/api/guess')

    assert response.status_code == 400
    data = response.get_json()
    assert data['success'] is False
    assert data['reason'] == 'incomplete_guess'
    assert data['error'] == 'Not enough letters'


def test_unknown_word_rejected(client):
    type_via_api(client, "ZZZZZ")
    response = client.post('/api/guess')

    assert response.status_code == 400
    data = response.get_json()
    assert data['reason'] == 'invalid_word'
    assert data['error'] == 'Not in word list'
    assert client.get('/api/state').get_json()['state']['active_guess'] == "ZZZZZ"


def test_wrong_guess_is_scored(client):
    type_via_api(client, "REACT")
    data = client.post('/api/guess').get_json()

    assert data['success'] is True
    assert data['game_over'] is False
    state = data['state']
    assert state['guessed_words'] == ["REACT"]
    assert state['current_row'] == 1
    assert state['board'] == [["CLOSE", "CLOSE", "CORRECT", "CLOSE", "INCORRECT"]]
    assert state['keyboard']['A'] == "CORRECT"
    assert state['keyboard']['T'] == "INCORRECT"
    assert state['keyboard']['Q'] == "UNUSED"


def test_winning_guess_ends_game(client):
    type_via_api(client, "CRANE")
    data = client.post('/api/guess').get_json()

    assert data['game_over'] is True
    state = data['state']
    assert state['target_word'] == "CRANE"
    assert state['current_row'] == 0
    result = state['result']
    assert result['won'] is True
    assert result['attempt_number'] == 1
    assert result['message'] == "Correct! You correctly guessed the word, CRANE"
    assert result['statistics']['games_won'] == 1
    assert result['statistics']['guess_distribution']['1'] == 1

    stats = client.get('/api/statistics').get_json()['statistics']
    assert stats['games_played'] == 1
    assert stats['win_percentage'] == 100
    assert stats['win_streak'] == 1


def test_keyboard_layout(client):
    type_via_api(client, "REACT")
    client.post('/api/guess')

    data = client.get('/api/keyboard').get_json()
    rows = data['rows']
    assert [k['key'] for k in rows[0]] == list("QWERTYUIOP")
    assert rows[2][0] == {'key': 'ENTER', 'status': 'UNUSED'}
    assert rows[2][-1]['key'] == 'BACKSPACE'
    assert data['keys']['R'] == 'CLOSE'


def test_reset(client):
    type_via_api(client, "CRANE")
    client.post('/api/guess')

    data = client.post('/api/reset').get_json()

    assert data['message'] == "Your game was reset!"
    assert data['statistics']['games_played'] == 0
    assert data['state']['current_row'] == 0


def test_save_progress(app, client, store):
    type_via_api(client, "REACT")
    client.post('/api/guess')

    response = client.post('/api/save')

    assert response.get_json() == {'success': True}
    assert json.loads(store.get(HISTORY_KEY))['guessedWords'] == ["REACT"]


def test_tutorial(client):
    data = client.get('/api/tutorial').get_json()
    assert [e['status'] for e in data['examples']] == ['CORRECT', 'CLOSE', 'INCORRECT']
    assert data['worked_example']['statuses'] == ["CLOSE", "CLOSE", "CORRECT", "CLOSE", "INCORRECT"]


def test_health(client):
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['engine_started'] is True
    assert data['vocabulary_size'] == len(WORDS)


def test_unstarted_engine_is_unavailable(app_config):
    engine = GameEngine(WordProvider(WORDS), MemoryStore())
    flask_app, _ = create_app(app_config, engine=engine)

    response = flask_app.test_client().get('/api/state')

    assert response.status_code == 500
    assert response.get_json()['error'] == 'Game service unavailable'
