"""
Tests for parent/child id-list maintenance.
"""

import logging

import pytest
from database import get_db
from models.integrity import (
    get_child_ids, link_child, set_child_ids, try_link_child, try_unlink_child,
    unlink_child
)
from tests.helper import row_version
from utils.errors import NotFoundError
from utils.helpers import generate_id


class TestIdLists:
    """Reading and writing child-id lists."""

    def test_link_appends(self, app, create_agency):
        agency = create_agency()
        db = get_db()
        first, second = generate_id(), generate_id()

        link_child(db, 'agencies', agency['id'], first)
        assert link_child(db, 'agencies', agency['id'], second) == [first, second]
        assert get_child_ids(db, 'agencies', agency['id']) == [first, second]

    def test_unlink_by_value(self, app, create_agency):
        agency = create_agency()
        db = get_db()
        ids = [generate_id() for _ in range(3)]
        set_child_ids(db, 'agencies', agency['id'], ids)

        assert unlink_child(db, 'agencies', agency['id'], ids[1]) == [ids[0], ids[2]]

    def test_unlink_absent_id_keeps_list(self, app, agency_with_boat):
        _, boat = agency_with_boat
        db = get_db()

        remaining = unlink_child(db, 'boats', boat['id'], generate_id())
        assert remaining == boat['availabilityIds']

    def test_every_write_bumps_version(self, app, create_agency):
        agency = create_agency()
        db = get_db()
        before = row_version('agencies', agency['id'])

        link_child(db, 'agencies', agency['id'], generate_id())
        assert row_version('agencies', agency['id']) == before + 1

    def test_missing_parent_raises(self, app):
        db = get_db()
        with pytest.raises(NotFoundError):
            get_child_ids(db, 'boats', generate_id())
        with pytest.raises(NotFoundError):
            set_child_ids(db, 'boats', generate_id(), [])


class TestBestEffort:
    """The try_* variants log instead of raising."""

    def test_link_to_missing_parent(self, app, caplog):
        db = get_db()
        with caplog.at_level(logging.ERROR):
            assert try_link_child(db, 'agencies', generate_id(), generate_id()) is False
        assert 'IntegrityWarning' in caplog.text

    def test_unlink_from_missing_parent(self, app, caplog):
        db = get_db()
        with caplog.at_level(logging.ERROR):
            assert try_unlink_child(db, 'boats', generate_id(), generate_id()) is False
        assert 'IntegrityWarning' in caplog.text

    def test_successful_link(self, app, create_agency):
        agency = create_agency()
        db = get_db()
        child = generate_id()

        assert try_link_child(db, 'agencies', agency['id'], child) is True
        assert get_child_ids(db, 'agencies', agency['id']) == [child]
