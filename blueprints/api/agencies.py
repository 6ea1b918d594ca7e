"""
Agency API routes.
"""

from utils.api_response import api_no_content, api_success
from utils.validators import check_agency_fields, check_required_fields
from models.agency import (
    get_all_agencies, get_agency_with_boats, create_agency, update_agency,
    delete_agency
)


def register_routes(bp):
    """Register agency API routes on the blueprint."""
    from blueprints.api import get_json_body

    @bp.route('/agencies', methods=['GET'])
    def agencies_list():
        """List active agencies."""
        return api_success(get_all_agencies())

    @bp.route('/agencies/<agency_id>', methods=['GET'])
    def agencies_detail(agency_id):
        """Get one agency with its boats populated."""
        return api_success(get_agency_with_boats(agency_id))

    @bp.route('/agencies', methods=['POST'])
    def agencies_create():
        """
        Create an agency.

        Request body:
            name: 2-25 characters
            phone: 10 digits, unique

        boatIds is ignored; it is maintained by boat creation.
        """
        body = get_json_body()
        check_required_fields(body, 'agency')
        values = check_agency_fields(body)

        agency = create_agency(values['name'], values['phone'])
        return api_success(agency, status=201)

    @bp.route('/agencies/<agency_id>', methods=['PUT'])
    def agencies_update(agency_id):
        """Update name and/or phone of an agency."""
        body = get_json_body()
        values = check_agency_fields(body)

        agency = update_agency(agency_id, **values)
        return api_success(agency)

    @bp.route('/agencies/<agency_id>', methods=['DELETE'])
    def agencies_delete(agency_id):
        """Delete an agency together with its boats and their availability."""
        delete_agency(agency_id)
        return api_no_content()
