from itertools import product
from typing import Any

import pytest
from pydantic import ValidationError

from registry.components.badges import SessionClosed, commit, discard, open_session, toggle
from registry.components.directory import (
    AdminCriteria,
    DirectoryCriteria,
    distinct_values,
    filter_profiles,
    merge_criteria,
)
from registry.components.profiles import normalize_row, normalize_rows
from registry.components.stats import country_count, featured_count, total
from registry.domain.entities import ProfileRecord
from registry.rules.models import DEFAULT_PROFILE_RULES

COLOURS = ["Red", "White", "Black", "Grey", "Silver"]
COUNTRIES = ["United Kingdom", "Japan", "Germany", "Australia"]
TRANSMISSIONS = ["Manual", "Auto"]


def make_record(n: int, **overrides: Any) -> ProfileRecord:
    values: dict[str, Any] = {
        "id": f"p{n}",
        "display_name": f"Owner {n}",
        "username": f"owner-{n}",
        "country": COUNTRIES[n % len(COUNTRIES)],
        "year": 2015 + n % 2,
        "transmission": TRANSMISSIONS[n % 3 % 2],
        "colour": COLOURS[n % len(COLOURS)],
        "public_profile": n % 4 != 0,
        "featured": n % 3 == 0,
    }
    values.update(overrides)
    return ProfileRecord(**values)


COLLECTIONS = {
    "empty": [],
    "one": [make_record(0)],
    "twenty": [make_record(n) for n in range(20)],
}

DIRECTORY_CRITERIA = [
    DirectoryCriteria(),
    DirectoryCriteria(colour="Red"),
    DirectoryCriteria(country="Japan"),
    DirectoryCriteria(transmission="Auto"),
    DirectoryCriteria(colour="Red", country="United Kingdom"),
    DirectoryCriteria(colour="Grey"),
]

ADMIN_CRITERIA = [
    AdminCriteria(),
    AdminCriteria(year=2016),
    AdminCriteria(public=True),
    AdminCriteria(public=False),
    AdminCriteria(featured=True),
    AdminCriteria(colour="Black", search_terms=("owner",)),
]


# --- Filter invariants ---
@pytest.mark.parametrize("name", COLLECTIONS)
def test_default_criteria_is_noop(name: str) -> None:
    records = COLLECTIONS[name]
    assert filter_profiles(records, DirectoryCriteria()) == tuple(records)
    assert filter_profiles(records, AdminCriteria()) == tuple(records)


@pytest.mark.parametrize("name", COLLECTIONS)
@pytest.mark.parametrize("criteria_set", [DIRECTORY_CRITERIA, ADMIN_CRITERIA])
def test_filter_composition(name: str, criteria_set: list[Any]) -> None:
    """Filtering by F1 then F2 equals F2 then F1 equals F1 and F2 at once."""
    records = COLLECTIONS[name]
    for f1, f2 in product(criteria_set, repeat=2):
        a = filter_profiles(filter_profiles(records, f1), f2)
        b = filter_profiles(filter_profiles(records, f2), f1)
        c = filter_profiles(records, merge_criteria(f1, f2))
        assert a == b == c


@pytest.mark.parametrize("name", COLLECTIONS)
def test_filter_is_idempotent(name: str) -> None:
    records = COLLECTIONS[name]
    for criteria in DIRECTORY_CRITERIA:
        once = filter_profiles(records, criteria)
        assert filter_profiles(records, criteria) == once
        assert filter_profiles(once, criteria) == once


# --- Stats invariants ---
@pytest.mark.parametrize("name", COLLECTIONS)
def test_stats_bounds(name: str) -> None:
    records = COLLECTIONS[name]
    assert total(records) == len(records)
    assert featured_count(records) <= total(records)


def test_stats_empty() -> None:
    assert total([]) == 0
    assert country_count([]) == 0


def test_country_scenario() -> None:
    countries = ["UK", "UK", "Japan", "Germany", "UK"]
    records = [make_record(i, country=c) for i, c in enumerate(countries)]

    assert distinct_values(records, "country") == ("Germany", "Japan", "UK")
    assert country_count(records) == 3


def test_red_scenario() -> None:
    records = [make_record(n, colour="Red" if n in (2, 5, 9) else "White") for n in range(10)]

    result = filter_profiles(records, DirectoryCriteria(colour="Red"))

    assert [r.id for r in result] == ["p2", "p5", "p9"]


# --- Badge session invariants ---
@pytest.mark.parametrize("badges", [(), ("A",), ("A", "B"), ("#001", "Club Supporter", "#002")])
@pytest.mark.parametrize("label", ["A", "B", "Z", "#002"])
def test_double_toggle_identity(badges: tuple[str, ...], label: str) -> None:
    record = make_record(0, badges=badges)
    session = open_session(record)

    assert toggle(toggle(session, label), label).badges == record.badges


@pytest.mark.parametrize(
    "overrides",
    [
        {"badges": ("A", "A")},
        {"badges": ("#001", "Club Supporter", "#001")},
        {"photo_urls": ("1", "2", "3", "4")},
        {"instagram_post_urls": ("a", "b", "c", "d")},
    ],
)
def test_record_rejects_broken_invariants(overrides: dict[str, Any]) -> None:
    """Duplicate badges and over-long lists cannot reach a badge session."""
    with pytest.raises(ValidationError):
        make_record(0, **overrides)


def test_profile_rules_cannot_raise_list_limits() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_PROFILE_RULES.model_validate(
            {**DEFAULT_PROFILE_RULES.model_dump(), "max_photos": 4}
        )


def test_commit_without_toggles_returns_seed() -> None:
    record = make_record(0, badges=("B", "A"))

    assert commit(open_session(record)).badges == ("B", "A")


def test_badge_scenario() -> None:
    session = open_session(make_record(0, badges=("A", "B")))

    session = toggle(session, "C")
    session = toggle(session, "A")

    assert commit(session).badges == ("B", "C")


@pytest.mark.parametrize("close", ["commit", "discard"])
def test_closed_session_rejects_everything(close: str) -> None:
    session = open_session(make_record(0, badges=("A",)))
    closed = commit(session).session if close == "commit" else discard(session)

    with pytest.raises(SessionClosed):
        toggle(closed, "B")
    with pytest.raises(SessionClosed):
        commit(closed)


# --- Normalization invariants ---
def test_missing_username_scenario() -> None:
    row = {
        "id": "x",
        "display_name": "Someone",
        "country": "Japan",
        "year": 2015,
        "transmission": "Auto",
        "colour": "Red",
    }

    result = normalize_row(row)
    batch = normalize_rows([row])

    assert result.status == "invalid"
    assert result.missing_fields == ("username",)
    assert batch.records == ()


def test_normalized_usernames_never_empty() -> None:
    rows = [
        {"display_name": "A", "username": u, "country": "UK", "year": 2015,
         "transmission": "Auto", "colour": "Red"}
        for u in ["ok", "", "   ", None, 0]
    ]

    batch = normalize_rows(rows)

    assert all(r.username for r in batch.records)
    assert [r.username for r in batch.records] == ["ok", "0"]
