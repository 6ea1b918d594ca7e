"""
Tests for boat routes and model.
"""

import json
from datetime import date, timedelta

import pytest
from database import get_db
from tests.helper import VALID_BOAT, row_version
from utils.datetime_helpers import get_today
from utils.helpers import generate_id


class TestBoatCreate:
    """Creating boats under agencies."""

    def test_example_scenario(self, client):
        """Agency, boat with 30 days, agency delete, boat gone."""
        response = client.post('/api/agencies', json={
            'name': 'A Valid Boat Company', 'phone': '9447888888'
        })
        assert response.status_code == 201
        agency_id = response.get_json()['id']

        response = client.post('/api/boats', json={**VALID_BOAT, 'agencyId': agency_id})
        assert response.status_code == 201
        boat = response.get_json()
        assert len(boat['availabilityIds']) == 30

        assert client.delete(f'/api/agencies/{agency_id}').status_code == 204
        assert client.get(f'/api/boats/{boat["id"]}').status_code == 404

    def test_boat_linked_to_agency_once(self, client, create_agency, create_boat):
        agency = create_agency()
        boat = create_boat(agency['id'])

        refetched = client.get(f'/api/agencies/{agency["id"]}').get_json()
        assert refetched['boatIds'].count(boat['id']) == 1

    def test_boat_ids_keep_creation_order(self, client, create_agency, create_boat):
        agency = create_agency()
        first = create_boat(agency['id'])
        second = create_boat(agency['id'], boatType='deluxe')

        refetched = client.get(f'/api/agencies/{agency["id"]}').get_json()
        assert refetched['boatIds'] == [first['id'], second['id']]

    def test_generated_calendar(self, client, agency_with_boat):
        _, boat = agency_with_boat
        tomorrow = get_today() + timedelta(days=1)

        availabilities = client.get(f'/api/availabilities/boat/{boat["id"]}').get_json()
        assert len(availabilities) == 30
        assert sorted(a['id'] for a in availabilities) == sorted(boat['availabilityIds'])

        days = [date.fromisoformat(a['date'][:10]) for a in availabilities]
        assert len(set(days)) == 30
        assert min(days) == tomorrow
        assert max(days) == tomorrow + timedelta(days=29)

        for availability in availabilities:
            assert availability['date'].endswith('T00:00:00.000Z')
            assert availability['isAvailable'] is True
            assert availability['baseRate'] == VALID_BOAT['defaultBaseRate']
            assert availability['adultRate'] == VALID_BOAT['defaultAdultRate']
            assert availability['childRate'] == VALID_BOAT['defaultChildRate']
            assert availability['infantRate'] == 0
            assert availability['boatId'] == boat['id']

    def test_infant_rate_defaults_to_zero(self, agency_with_boat):
        _, boat = agency_with_boat
        assert boat['defaultInfantRate'] == 0

    def test_round_trip(self, client, agency_with_boat):
        agency, boat = agency_with_boat
        fetched = client.get(f'/api/boats/{boat["id"]}').get_json()
        for field, value in VALID_BOAT.items():
            assert fetched[field] == value
        assert fetched['agencyId'] == agency['id']
        assert fetched['agency']['id'] == agency['id']

    @pytest.mark.parametrize('field', [
        'numberOfBedrooms', 'boatType', 'minAdultsRequired', 'defaultBaseRate',
        'defaultAdultRate', 'defaultChildRate', 'agencyId'
    ])
    def test_missing_field(self, client, create_agency, field):
        agency = create_agency()
        payload = {**VALID_BOAT, 'agencyId': agency['id']}
        del payload[field]

        response = client.post('/api/boats', json=payload)
        assert response.status_code == 400
        assert response.get_json()['error'] == f'Missing required field: {field}'

    def test_zero_bedrooms_accepted(self, client, create_agency):
        agency = create_agency()
        payload = {**VALID_BOAT, 'numberOfBedrooms': 0, 'agencyId': agency['id']}
        response = client.post('/api/boats', json=payload)
        assert response.status_code == 201
        assert response.get_json()['numberOfBedrooms'] == 0

    def test_invalid_boat_type(self, client, create_agency):
        agency = create_agency()
        payload = {**VALID_BOAT, 'boatType': 'yacht', 'agencyId': agency['id']}
        response = client.post('/api/boats', json=payload)
        assert response.status_code == 400

    def test_malformed_agency_id(self, client):
        response = client.post('/api/boats', json={**VALID_BOAT, 'agencyId': 'invalid'})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Invalid agencyId'

    def test_unknown_agency(self, client):
        response = client.post('/api/boats', json={**VALID_BOAT, 'agencyId': generate_id()})
        assert response.status_code == 404
        assert response.get_json()['error'] == 'Agency not found'

    def test_deleted_agency_rejected(self, client, create_agency):
        agency = create_agency()
        client.delete(f'/api/agencies/{agency["id"]}')

        response = client.post('/api/boats', json={**VALID_BOAT, 'agencyId': agency['id']})
        assert response.status_code == 404

    def test_rejected_boat_not_stored(self, client, create_agency):
        agency = create_agency()
        client.post('/api/boats', json={**VALID_BOAT, 'minAdultsRequired': 0,
                                         'agencyId': agency['id']})
        assert client.get('/api/boats').get_json() == []
        assert client.get('/api/availabilities').get_json() == []

    @pytest.mark.parametrize('field, value, error', [
        ('numberOfBedrooms', float('nan'), 'Number of bedrooms must be between 0 and 10'),
        ('defaultBaseRate', float('inf'), 'defaultBaseRate must be a number'),
        ('defaultBaseRate', 10 ** 30, 'defaultBaseRate must be a number'),
        ('minAdultsRequired', 2 ** 63, 'Minimum number of adults required must be greater than 0'),
    ])
    def test_unstorable_number_rejected(self, client, create_agency, field, value, error):
        """NaN, Infinity and oversized integers are validation errors, not 500s."""
        agency = create_agency()
        body = json.dumps({**VALID_BOAT, field: value, 'agencyId': agency['id']})

        response = client.post('/api/boats', data=body, content_type='application/json')
        assert response.status_code == 400
        assert response.get_json()['error'] == error
        assert client.get('/api/boats').get_json() == []


class TestBoatUpdate:
    """Updating boats."""

    def test_bedrooms_out_of_range(self, client, agency_with_boat):
        _, boat = agency_with_boat
        response = client.put(f'/api/boats/{boat["id"]}', json={'numberOfBedrooms': 100})
        assert response.status_code == 400
        assert response.get_json()['error'] == 'Number of bedrooms must be between 0 and 10'

    def test_partial_update(self, client, agency_with_boat):
        _, boat = agency_with_boat
        response = client.put(f'/api/boats/{boat["id"]}', json={'defaultBaseRate': 9500})
        assert response.status_code == 200
        data = response.get_json()
        assert data['defaultBaseRate'] == 9500
        assert data['boatType'] == boat['boatType']

    def test_agency_and_availability_ids_immutable(self, client, agency_with_boat, create_agency):
        _, boat = agency_with_boat
        other = create_agency()
        response = client.put(f'/api/boats/{boat["id"]}', json={
            'agencyId': other['id'], 'availabilityIds': []
        })
        assert response.status_code == 200
        data = response.get_json()
        assert data['agencyId'] == boat['agencyId']
        assert data['availabilityIds'] == boat['availabilityIds']

    def test_update_unknown_boat(self, client):
        response = client.put(f'/api/boats/{generate_id()}', json={'numberOfBedrooms': 1})
        assert response.status_code == 404


class TestBoatDelete:
    """Deleting boats."""

    def test_boat_delete_cascades(self, client, agency_with_boat):
        agency, boat = agency_with_boat

        assert client.delete(f'/api/boats/{boat["id"]}').status_code == 204

        refetched = client.get(f'/api/agencies/{agency["id"]}').get_json()
        assert boat['id'] not in refetched['boatIds']
        assert refetched['boats'] == []

        remaining = client.get('/api/availabilities').get_json()
        assert [a for a in remaining if a['boatId'] == boat['id']] == []

    def test_delete_twice_is_404(self, client, agency_with_boat):
        agency, boat = agency_with_boat
        client.delete(f'/api/boats/{boat["id"]}')
        boat_ids = client.get(f'/api/agencies/{agency["id"]}').get_json()['boatIds']
        version = row_version('agencies', agency['id'])

        assert client.delete(f'/api/boats/{boat["id"]}').status_code == 404

        assert client.get(f'/api/agencies/{agency["id"]}').get_json()['boatIds'] == boat_ids
        assert row_version('agencies', agency['id']) == version

    def test_hard_delete(self, app, client, agency_with_boat):
        agency, boat = agency_with_boat
        app.config['DELETE_STRATEGY'] = 'hard'

        assert client.delete(f'/api/boats/{boat["id"]}').status_code == 204

        assert client.get(f'/api/agencies/{agency["id"]}').get_json()['boatIds'] == []
        assert row_version('boats', boat['id']) is None
        db = get_db()
        remaining = db.execute(
            'SELECT COUNT(*) FROM availabilities WHERE boat_id = ?', (boat['id'],)
        ).fetchone()[0]
        assert remaining == 0

    def test_other_boats_untouched(self, client, create_agency, create_boat):
        agency = create_agency()
        keep = create_boat(agency['id'])
        drop = create_boat(agency['id'])

        client.delete(f'/api/boats/{drop["id"]}')

        refetched = client.get(f'/api/agencies/{agency["id"]}').get_json()
        assert refetched['boatIds'] == [keep['id']]
        kept = client.get(f'/api/availabilities/boat/{keep["id"]}').get_json()
        assert len(kept) == 30
