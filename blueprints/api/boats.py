"""
Boat API routes.
"""

from utils.api_response import api_no_content, api_success
from utils.validators import (
    check_boat_fields, check_reference_id, check_required_fields
)
from models.boat import (
    get_all_boats, get_boat_by_id, create_boat, update_boat, delete_boat
)


def register_routes(bp):
    """Register boat API routes on the blueprint."""
    from blueprints.api import get_json_body

    @bp.route('/boats', methods=['GET'])
    def boats_list():
        """List active boats."""
        return api_success(get_all_boats())

    @bp.route('/boats/<boat_id>', methods=['GET'])
    def boats_detail(boat_id):
        """Get one boat."""
        return api_success(get_boat_by_id(boat_id))

    @bp.route('/boats', methods=['POST'])
    def boats_create():
        """
        Create a boat under an existing agency.

        The response carries the availabilityIds generated for the next
        30 days.
        """
        body = get_json_body()
        check_required_fields(body, 'boat')
        values = check_boat_fields(body)
        agency_id = check_reference_id(body, 'agencyId')

        boat = create_boat(agency_id, **values)
        return api_success(boat, status=201)

    @bp.route('/boats/<boat_id>', methods=['PUT'])
    def boats_update(boat_id):
        """Update boat fields; agencyId and availabilityIds cannot change."""
        body = get_json_body()
        values = check_boat_fields(body)

        boat = update_boat(boat_id, **values)
        return api_success(boat)

    @bp.route('/boats/<boat_id>', methods=['DELETE'])
    def boats_delete(boat_id):
        """Delete a boat and its availability."""
        delete_boat(boat_id)
        return api_no_content()
