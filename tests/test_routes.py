import pytest

from shell_charset import create_app
from shell_charset.config import Settings

TEXT = 'あいうえお'


@pytest.fixture()
def client():
    app = create_app(Settings(LOG_DIR=''))
    app.config['TESTING'] = True
    return app.test_client()


def test_health(client):
    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.get_json() == {'ok': True}


def test_list_labels(client):
    resp = client.get('/api/v1/charset/labels')
    assert resp.get_json()['data'] == ['ASCII', 'Shift_JIS', 'ISO-2022-JP', 'EUC-JP', 'UTF-8']


def test_parse_label(client):
    resp = client.post('/api/v1/charset/parse', json={'text': 'Shift_JIS\r\n...'})
    body = resp.get_json()
    assert resp.status_code == 200
    assert body['success']
    assert body['data'] == {'charset': 'SHIFT_JIS', 'label': 'Shift_JIS', 'remainder': '\r\n...'}


def test_parse_label_no_match(client):
    resp = client.post('/api/v1/charset/parse', json={'text': 'x76'})
    assert resp.status_code == 400
    assert resp.get_json()['error']['code'] == 'NO_MATCH'


def test_parse_label_requires_text(client):
    resp = client.post('/api/v1/charset/parse', json={})
    assert resp.status_code == 400
    assert resp.get_json()['error']['code'] == 'INVALID_ARGUMENT'


def test_decode_body(client):
    resp = client.post(
        '/api/v1/charset/decode',
        query_string={'charset': 'EUC-JP'},
        data=TEXT.encode('euc_jp'),
        content_type='application/octet-stream',
    )
    assert resp.status_code == 200
    assert resp.get_json()['data'] == {'charset': 'EUC_JP', 'text': TEXT}


def test_decode_body_mismatch(client):
    resp = client.post(
        '/api/v1/charset/decode',
        query_string={'charset': 'UTF-8'},
        data=TEXT.encode('cp932'),
        content_type='application/octet-stream',
    )
    assert resp.status_code == 422
    assert resp.get_json()['error']['code'] == 'DECODE_MISMATCH'


def test_decode_body_default_never_fails(client):
    resp = client.post(
        '/api/v1/charset/decode',
        query_string={'charset': 'Default'},
        data=b'\xff\xfe\x80',
        content_type='application/octet-stream',
    )
    assert resp.status_code == 200
    assert resp.get_json()['data']['charset'] == 'DEFAULT'


def test_decode_body_requires_charset(client):
    resp = client.post('/api/v1/charset/decode', data=b'abc', content_type='application/octet-stream')
    assert resp.status_code == 400


def test_decode_body_unknown_label(client):
    resp = client.post(
        '/api/v1/charset/decode',
        query_string={'charset': 'utf-8'},
        data=b'abc',
        content_type='application/octet-stream',
    )
    assert resp.get_json()['error']['code'] == 'NO_MATCH'


def test_detect(client):
    raw = ('EUC-JP\r\n' + TEXT).encode('euc_jp')
    resp = client.post('/api/v1/charset/detect', data=raw, content_type='application/octet-stream')
    data = resp.get_json()['data']
    assert data['charset'] == 'EUC_JP'
    assert data['text'] == 'EUC-JP\r\n' + TEXT


def test_unknown_route(client):
    resp = client.get('/api/v1/nope')
    assert resp.status_code == 404
    assert resp.get_json()['error']['code'] == 'NOT_FOUND'


def test_detect_uses_app_settings():
    app = create_app(Settings(LOG_DIR='', CHARSET_FALLBACK_ON_NO_MATCH=False))
    resp = app.test_client().post('/api/v1/charset/detect', data=b'x76', content_type='application/octet-stream')
    assert resp.status_code == 400
    assert resp.get_json()['error']['code'] == 'NO_MATCH'


def test_detect_falls_back_by_default(client):
    resp = client.post('/api/v1/charset/detect', data=b'x76', content_type='application/octet-stream')
    data = resp.get_json()['data']
    assert data['charset'] == 'DEFAULT'
    assert data['label'] is None
    assert data['fallback_used']


def test_create_app_rejects_invalid_settings():
    with pytest.raises(ValueError):
        create_app(Settings(LOG_DIR='', CHARSET_HEADER_PROBE_BYTES=0))
