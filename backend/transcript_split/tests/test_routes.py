"""
API Route Tests
===============
Tests for the Flask service through the test client.
"""

import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from transcript_split import __version__
from transcript_split.app import create_app
from transcript_split.config import AppConfig


def create_client(config=None):
    app = create_app(config or AppConfig())
    app.config['TESTING'] = True
    return app.test_client()


def sample_payload():
    return {
        'segments': [
            {'speaker': 'A', 'timestamp': '00:10', 'startTimeSeconds': 10, 'text': 'Hello. World.'},
        ],
        'options': {'mode': 'sentence'}
    }


# =============================================================================
# CORE ROUTE TESTS
# =============================================================================

def test_health():
    response = create_client().get('/health')

    assert response.status_code == 200
    data = response.get_json()
    assert data['status'] == 'healthy'
    assert data['version'] == __version__

    print("[PASS] Health check test passed")


def test_unknown_route_returns_json_404():
    response = create_client().get('/api/nowhere')

    assert response.status_code == 404
    assert 'error' in response.get_json()

    print("[PASS] 404 handler test passed")


# =============================================================================
# SPLIT ROUTE TESTS
# =============================================================================

def test_split_sentence_mode():
    response = create_client().post('/api/split', json=sample_payload())

    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['mode'] == 'sentence'
    assert data['input_count'] == 1
    assert data['segment_count'] == 2
    assert [s['text'] for s in data['segments']] == ['Hello.', 'World.']
    assert set(data['segments'][0]) == {'speaker', 'timestamp', 'startTimeSeconds', 'text'}
    assert data['segments'][0]['timestamp'] == '00:10'

    print("[PASS] Sentence split route test passed")


def test_split_uses_configured_defaults():
    """Without options the configured mode applies."""
    config = AppConfig()
    config.splitting.mode = "character"
    config.splitting.max_characters = 10
    config.splitting.min_characters = 5

    payload = {'segments': [
        {'speaker': 'A', 'startTimeSeconds': 0, 'text': 'aaaa'},
        {'speaker': 'A', 'startTimeSeconds': 1, 'text': 'bbbb'},
        {'speaker': 'A', 'startTimeSeconds': 2, 'text': 'cccc'},
    ]}
    response = create_client(config).post('/api/split', json=payload)

    data = response.get_json()
    assert response.status_code == 200
    assert data['mode'] == 'character'
    assert [s['text'] for s in data['segments']] == ['aaaa bbbb', 'cccc']

    print("[PASS] Configured defaults route test passed")


def test_split_unknown_mode_returns_input():
    payload = sample_payload()
    payload['options'] = {'mode': 'paragraph'}
    response = create_client().post('/api/split', json=payload)

    data = response.get_json()
    assert response.status_code == 200
    assert data['mode'] is None
    assert data['segments'] == payload['segments']

    print("[PASS] Unknown mode route test passed")


def test_split_cjk_round_trip():
    payload = {
        'segments': [{'speaker': '甲', 'startTimeSeconds': 0, 'text': '你好。世界！'}],
        'options': {'mode': 'sentence'}
    }
    response = create_client().post('/api/split', json=payload)

    data = response.get_json()
    assert [s['text'] for s in data['segments']] == ['你好。', '世界！']
    assert data['segments'][1]['speaker'] == '甲'

    print("[PASS] CJK route test passed")


def test_split_rejects_bad_requests():
    """Malformed bodies and segments are rejected with 400."""
    client = create_client()

    assert client.post('/api/split', data='not json', content_type='text/plain').status_code == 400
    assert client.post('/api/split', json=[1, 2]).status_code == 400
    assert client.post('/api/split', json={'segments': 'nope'}).status_code == 400

    bad_segment = {'segments': [{'speaker': 'A', 'startTimeSeconds': -3, 'text': 'x'}]}
    response = client.post('/api/split', json=bad_segment)
    assert response.status_code == 400
    assert 'startTimeSeconds' in response.get_json()['error']

    print("[PASS] Bad request test passed")


def test_split_rejects_too_many_segments():
    config = AppConfig()
    config.flask.max_segments_per_request = 2

    payload = {'segments': [
        {'speaker': 'A', 'startTimeSeconds': i, 'text': 'x'} for i in range(3)
    ]}
    response = create_client(config).post('/api/split', json=payload)

    assert response.status_code == 413

    print("[PASS] Segment limit test passed")


def test_list_modes():
    response = create_client().get('/api/split/modes')

    assert response.status_code == 200
    data = response.get_json()
    assert [m['mode'] for m in data['modes']] == ['sentence', 'time', 'character', 'semantic']
    assert data['defaults']['mode'] == 'semantic'
    assert data['defaults']['maxDuration'] == 30.0

    print("[PASS] List modes test passed")


def run_all_tests():
    """Run all route tests."""
    print("\n" + "="*60)
    print("API ROUTE TESTS")
    print("="*60 + "\n")

    test_health()
    test_unknown_route_returns_json_404()
    test_split_sentence_mode()
    test_split_uses_configured_defaults()
    test_split_unknown_mode_returns_input()
    test_split_cjk_round_trip()
    test_split_rejects_bad_requests()
    test_split_rejects_too_many_segments()
    test_list_modes()

    print("\n" + "="*60)
    print("ALL ROUTE TESTS PASSED")
    print("="*60 + "\n")


if __name__ == "__main__":
    run_all_tests()
