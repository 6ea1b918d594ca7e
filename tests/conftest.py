"""
Pytest configuration and fixtures.
Every test gets its own SQLite file and a freshly created schema.
"""

import os
import pytest

# Make sure nothing falls back to the development database
os.environ['FLASK_ENV'] = 'test'

from tests.helper import VALID_AGENCY, VALID_BOAT


@pytest.fixture
def app(tmp_path):
    """Create test application with an isolated database."""
    from app import create_app
    from database import init_db

    app = create_app('test')
    app.config['TESTING'] = True
    app.config['DATABASE_PATH'] = str(tmp_path / 'boat_inventory_test.db')

    with app.app_context():
        init_db()
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def create_agency(client):
    """Factory creating an agency through the API."""
    counter = {'n': 0}

    def _create(**overrides):
        counter['n'] += 1
        payload = {**VALID_AGENCY, 'phone': f'{9447888800 + counter["n"]}', **overrides}
        response = client.post('/api/agencies', json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _create


@pytest.fixture
def create_boat(client):
    """Factory creating a boat under an agency through the API."""

    def _create(agency_id, **overrides):
        payload = {**VALID_BOAT, 'agencyId': agency_id, **overrides}
        response = client.post('/api/boats', json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _create


@pytest.fixture
def agency_with_boat(create_agency, create_boat):
    """An agency owning one boat with its generated calendar."""
    agency = create_agency()
    boat = create_boat(agency['id'])
    return agency, boat
