"""
Demo seed data.
Agencies and boats are created through the model layer so that boat_ids,
availability_ids and the generated calendars are set up exactly as the
API would set them up.
"""

DEMO_AGENCIES = [
    {
        'name': 'Boat Company',
        'phone': '1234567890',
        'boats': [
            {
                'numberOfBedrooms': 2,
                'boatType': 'luxury',
                'minAdultsRequired': 2,
                'defaultBaseRate': 9000,
                'defaultAdultRate': 1500,
                'defaultChildRate': 750,
                'defaultInfantRate': 0,
            },
            {
                'numberOfBedrooms': 1,
                'boatType': 'premium',
                'minAdultsRequired': 1,
                'defaultBaseRate': 5000,
                'defaultAdultRate': 1000,
                'defaultChildRate': 500,
                'defaultInfantRate': 0,
            },
        ],
    },
    {
        'name': 'Holiday Inn',
        'phone': '0987654321',
        'boats': [
            {
                'numberOfBedrooms': 1,
                'boatType': 'deluxe',
                'minAdultsRequired': 1,
                'defaultBaseRate': 5000,
                'defaultAdultRate': 1000,
                'defaultChildRate': 500,
                'defaultInfantRate': 0,
            },
            {
                'numberOfBedrooms': 3,
                'boatType': 'premium',
                'minAdultsRequired': 2,
                'defaultBaseRate': 12000,
                'defaultAdultRate': 1500,
                'defaultChildRate': 750,
                'defaultInfantRate': 0,
            },
        ],
    },
]


def seed_database(agencies=None) -> list:
    """
    Insert demo agencies and boats.

    Args:
        agencies: Agency entries (defaults to DEMO_AGENCIES)

    Returns:
        List of created agency documents with their boat ids
    """
    from models.agency import create_agency, get_agency_by_id
    from models.boat import create_boat

    created = []
    for entry in agencies or DEMO_AGENCIES:
        agency = create_agency(entry['name'], entry['phone'])
        for boat in entry['boats']:
            create_boat(agency['id'], **boat)
        created.append(get_agency_by_id(agency['id']))
    return created
