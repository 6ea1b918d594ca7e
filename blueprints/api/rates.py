"""
Rate API routes.
"""

from utils.api_response import api_no_content, api_success
from utils.validators import (
    check_date, check_rate_fields, check_required_fields, is_present
)
from models.rate import (
    get_all_rates, get_rate_by_id, create_rate, update_rate, delete_rate
)


def register_routes(bp):
    """Register rate API routes on the blueprint."""
    from blueprints.api import get_json_body

    @bp.route('/rates', methods=['GET'])
    def rates_list():
        """List active rates."""
        return api_success(get_all_rates())

    @bp.route('/rates/<rate_id>', methods=['GET'])
    def rates_detail(rate_id):
        """Get one rate."""
        return api_success(get_rate_by_id(rate_id))

    @bp.route('/rates', methods=['POST'])
    def rates_create():
        """Create a dated rate."""
        body = get_json_body()
        check_required_fields(body, 'rate')
        date = check_date(body)
        values = check_rate_fields(body)

        rate = create_rate(
            date=date,
            base_rate=values['baseRate'],
            adult_rate=values['adultRate'],
            child_rate=values['childRate'],
            infant_rate=values.get('infantRate', 0)
        )
        return api_success(rate, status=201)

    @bp.route('/rates/<rate_id>', methods=['PUT'])
    def rates_update(rate_id):
        """Partially update a rate."""
        body = get_json_body()
        values = check_rate_fields(body)
        if is_present(body, 'date'):
            values['date'] = check_date(body)

        rate = update_rate(rate_id, **values)
        return api_success(rate)

    @bp.route('/rates/<rate_id>', methods=['DELETE'])
    def rates_delete(rate_id):
        """Delete a rate."""
        delete_rate(rate_id)
        return api_no_content()
