"""
Views component unit tests.

Tests for directory, admin, home and profile view composition.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from registry.components.badges import BadgeCatalogue, commit, open_session, toggle
from registry.components.directory import AdminCriteria, DirectoryCriteria
from registry.components.views import (
    ViewContext,
    compose_admin_view,
    compose_directory_view,
    compose_home_view,
    compose_profile_view,
    compose_view,
)
from registry.domain.entities import ProfileRecord, SiteSettings


def make_record(n: int, **overrides: Any) -> ProfileRecord:
    values: dict[str, Any] = {
        "id": f"p{n}",
        "display_name": f"Owner {n}",
        "username": f"owner-{n}",
        "country": "United Kingdom",
        "region": "Wales",
        "year": 2015,
        "transmission": "Manual",
        "colour": "Red",
        "public_profile": True,
        "created_at": datetime(2024, 1, n + 1, tzinfo=UTC),
    }
    values.update(overrides)
    return ProfileRecord(**values)


@pytest.fixture
def records() -> list[ProfileRecord]:
    return [
        make_record(0, colour="Red", country="Japan"),
        make_record(1, colour="White", featured=True),
        make_record(2, colour="Red", transmission="Auto", public_profile=False),
        make_record(3, colour="Black", country="Germany", featured=True, badges=("#001",)),
    ]


@pytest.fixture
def admin_ctx() -> ViewContext:
    return ViewContext(is_admin=True, catalogue=BadgeCatalogue(("Club Supporter",), ("#001",)))


# --- Generic Composition ---


class TestComposeView:
    def test_four_parts(self, records: list[ProfileRecord]) -> None:
        view = compose_view(records, DirectoryCriteria(colour="Red"))

        assert [r.id for r in view.filtered_records] == ["p0", "p2"]
        assert view.available_filter_options["colour"] == ("Black", "Red", "White")
        assert view.stats.total == 4
        assert view.active_badge_edit is None

    def test_repeat_calls_equal(self, records: list[ProfileRecord]) -> None:
        criteria = DirectoryCriteria(country="Japan")

        assert compose_view(records, criteria) == compose_view(records, criteria)

    def test_options_are_read_only(self, records: list[ProfileRecord]) -> None:
        view = compose_view(records, DirectoryCriteria())

        with pytest.raises(TypeError):
            view.available_filter_options["colour"] = ()  # type: ignore[index]


# --- Directory ---


class TestDirectoryView:
    def test_filtered_cards(self, records: list[ProfileRecord]) -> None:
        public = [r for r in records if r.public_profile]
        ctx = ViewContext(settings=SiteSettings(site_title="Aero Club"))

        view = compose_directory_view(public, DirectoryCriteria(colour="Red"), ctx)

        assert view.total == 3
        assert view.shown == 1
        assert view.cards[0].path == "/member/owner-0"
        assert view.cards[0].location == "Japan"
        assert view.options["transmission"] == ("Manual",)
        assert view.settings.site_title == "Aero Club"

    def test_default_criteria(self, records: list[ProfileRecord]) -> None:
        view = compose_directory_view(records)

        assert view.shown == view.total == 4
        assert view.cards[1].location == "United Kingdom • Wales"


# --- Admin ---


class TestAdminView:
    def test_requires_admin(self, records: list[ProfileRecord]) -> None:
        with pytest.raises(PermissionError):
            compose_admin_view(records)

    def test_filters_and_options(
        self, records: list[ProfileRecord], admin_ctx: ViewContext
    ) -> None:
        view = compose_admin_view(records, AdminCriteria(public=False), admin_ctx)

        assert [r.id for r in view.records] == ["p2"]
        assert set(view.options) == {"colour", "country", "year"}
        assert view.stats.public == 3
        assert view.active_badge_edit is None

    def test_open_badge_session(self, records: list[ProfileRecord], admin_ctx: ViewContext) -> None:
        session = toggle(open_session(records[3]), "Club Supporter")

        view = compose_admin_view(records, None, admin_ctx, badge_session=session)

        edit = view.active_badge_edit
        assert edit is not None
        assert edit.profile_id == "p3"
        assert edit.display_name == "Owner 3"
        assert edit.selected == ("#001", "Club Supporter")
        assert edit.available == ("Club Supporter", "#001")
        assert edit.has_changes

    def test_closed_session_not_shown(
        self, records: list[ProfileRecord], admin_ctx: ViewContext
    ) -> None:
        closed = commit(open_session(records[0])).session

        view = compose_admin_view(records, None, admin_ctx, badge_session=closed)

        assert view.active_badge_edit is None


# --- Home & Profile ---


class TestHomeView:
    def test_recent_featured_and_stats(self, records: list[ProfileRecord]) -> None:
        view = compose_home_view(records, recent_limit=2, featured_limit=1)

        assert [c.record.id for c in view.recent] == ["p3", "p1"]
        assert [c.record.id for c in view.featured] == ["p3"]
        assert view.stats.total == 3
        assert view.stats.countries == 3

    def test_missing_timestamps_sort_last(self) -> None:
        records = [make_record(0, created_at=None), make_record(1)]

        view = compose_home_view(records)

        assert [c.record.id for c in view.recent] == ["p1", "p0"]


class TestProfileView:
    def test_public_profile(self, records: list[ProfileRecord]) -> None:
        view = compose_profile_view(records, "owner-3")

        assert view is not None
        assert view.card.badges[0].tone == "numbered"
        assert view.member_since == datetime(2024, 1, 4, tzinfo=UTC)

    def test_private_hidden_unless_admin(
        self, records: list[ProfileRecord], admin_ctx: ViewContext
    ) -> None:
        assert compose_profile_view(records, "owner-2") is None
        assert compose_profile_view(records, "owner-2", admin_ctx) is not None

    def test_unknown_username(self, records: list[ProfileRecord]) -> None:
        assert compose_profile_view(records, "nobody") is None
