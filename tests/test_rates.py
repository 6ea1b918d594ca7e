"""
Tests for rate routes.
"""

import json

from tests.helper import VALID_RATE
from utils.helpers import generate_id


class TestRates:
    """Rate CRUD."""

    def test_rates_returned_as_json(self, client):
        response = client.get('/api/rates')
        assert response.status_code == 200
        assert response.content_type.startswith('application/json')

    def test_create_and_list(self, client):
        response = client.post('/api/rates', json=VALID_RATE)
        assert response.status_code == 201

        dates = [r['date'] for r in client.get('/api/rates').get_json()]
        assert '2023-09-02T00:00:00.000Z' in dates

    def test_missing_field(self, client):
        payload = dict(VALID_RATE)
        del payload['baseRate']
        response = client.post('/api/rates', json=payload)
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Missing required field: baseRate'

    def test_zero_rate_accepted(self, client):
        response = client.post('/api/rates', json={**VALID_RATE, 'childRate': 0})
        assert response.status_code == 201
        assert response.get_json()['childRate'] == 0

    def test_update(self, client):
        rate = client.post('/api/rates', json=VALID_RATE).get_json()
        response = client.put(f'/api/rates/{rate["id"]}', json={
            'adultRate': 650, 'date': '2023-09-03T10:00:00.000Z'
        })
        assert response.status_code == 200
        data = response.get_json()
        assert data['adultRate'] == 650
        assert data['date'] == '2023-09-03T00:00:00.000Z'

    def test_invalid_date_on_update(self, client):
        rate = client.post('/api/rates', json=VALID_RATE).get_json()
        response = client.put(f'/api/rates/{rate["id"]}', json={'date': 'tomorrow'})
        assert response.status_code == 400

    def test_delete(self, client):
        rate = client.post('/api/rates', json=VALID_RATE).get_json()
        assert client.delete(f'/api/rates/{rate["id"]}').status_code == 204
        assert client.get(f'/api/rates/{rate["id"]}').status_code == 404
        assert client.delete(f'/api/rates/{rate["id"]}').status_code == 404

    def test_unknown_rate(self, client):
        response = client.get(f'/api/rates/{generate_id()}')
        assert response.status_code == 404
        assert response.get_json()['error'] == 'Rate not found'

    def test_infinite_rate_rejected(self, client):
        body = json.dumps({**VALID_RATE, 'baseRate': float('inf')})
        response = client.post('/api/rates', data=body, content_type='application/json')
        assert response.status_code == 400
        assert response.get_json()['error'] == 'baseRate must be a number'
        assert client.get('/api/rates').get_json() == []

    def test_oversized_rate_rejected_on_update(self, client):
        rate = client.post('/api/rates', json=VALID_RATE).get_json()
        body = json.dumps({'childRate': 10 ** 30})
        response = client.put(f'/api/rates/{rate["id"]}', data=body,
                              content_type='application/json')
        assert response.status_code == 400
        assert client.get(f'/api/rates/{rate["id"]}').get_json()['childRate'] == 300
