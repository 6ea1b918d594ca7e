"""
Availability API routes.
"""

from utils.api_response import api_no_content, api_success
from utils.validators import (
    check_date, check_is_available, check_rate_fields, check_reference_id,
    check_required_fields, is_present
)
from models.availability import (
    get_all_availabilities, get_availability_by_id, get_availabilities_by_boat,
    create_availability, update_availability, delete_availability,
    delete_availabilities_by_boat
)


def register_routes(bp):
    """Register availability API routes on the blueprint."""
    from blueprints.api import get_json_body

    @bp.route('/availabilities', methods=['GET'])
    def availabilities_list():
        """List active availability records."""
        return api_success(get_all_availabilities())

    @bp.route('/availabilities/<availability_id>', methods=['GET'])
    def availabilities_detail(availability_id):
        """Get one availability record."""
        return api_success(get_availability_by_id(availability_id))

    @bp.route('/availabilities/boat/<boat_id>', methods=['GET'])
    def availabilities_by_boat(boat_id):
        """List the availability of one boat."""
        return api_success(get_availabilities_by_boat(boat_id))

    @bp.route('/availabilities', methods=['POST'])
    def availabilities_create():
        """
        Create one availability record for a boat.

        Request body:
            date: 'YYYY-MM-DDTHH:mm:ss.sssZ', stored at midnight
            isAvailable: boolean
            baseRate, adultRate, childRate, infantRate (default 0)
            boatId: owning boat
        """
        body = get_json_body()
        check_required_fields(body, 'availability')
        date = check_date(body)
        is_available = check_is_available(body)
        rates = check_rate_fields(body)
        boat_id = check_reference_id(body, 'boatId')

        availability = create_availability(
            boat_id=boat_id,
            date=date,
            is_available=is_available,
            base_rate=rates['baseRate'],
            adult_rate=rates['adultRate'],
            child_rate=rates['childRate'],
            infant_rate=rates.get('infantRate', 0)
        )
        return api_success(availability, status=201)

    @bp.route('/availabilities/<availability_id>', methods=['PUT'])
    def availabilities_update(availability_id):
        """Partially update a record; date and boatId cannot change."""
        body = get_json_body()
        values = check_rate_fields(body)
        if is_present(body, 'isAvailable'):
            values['isAvailable'] = check_is_available(body)

        availability = update_availability(availability_id, **values)
        return api_success(availability)

    @bp.route('/availabilities/<availability_id>', methods=['DELETE'])
    def availabilities_delete(availability_id):
        """Delete one availability record."""
        delete_availability(availability_id)
        return api_no_content()

    @bp.route('/availabilities/boat/<boat_id>', methods=['DELETE'])
    def availabilities_delete_by_boat(boat_id):
        """Delete all availability of a boat."""
        delete_availabilities_by_boat(boat_id)
        return api_no_content()
