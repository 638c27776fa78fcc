from pathlib import Path
from typing import Any

import pytest

from registry.rules.loader import load_rules
from registry.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    path = PROJECT_ROOT / "registry.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Rules not found at {path}")
    return path


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def owner_rows() -> list[dict[str, Any]]:
    """Rows shaped like the hosted backend's owners table."""
    return [
        {
            "id": "1",
            "user_id": "u1",
            "display_name": "Alex Jones",
            "username": "alex-jones",
            "country": "United Kingdom",
            "uk_region": "Scotland",
            "year": 2015,
            "transmission": "Manual",
            "colour": "Red",
            "instagram_handle": "alexaero",
            "instagram_post_urls": ["https://www.instagram.com/p/AAA111/"],
            "photo_urls": None,
            "public_profile": True,
            "featured": True,
            "badges": ["Owner / Creator", "#001"],
            "featured_quote": "Two hundred of these in the world.",
            "created_at": "2024-03-01T09:00:00Z",
        },
        {
            "id": "2",
            "user_id": "u2",
            "display_name": "Kenji Sato",
            "username": "kenji",
            "country": "Japan",
            "uk_region": "",
            "year": 2016,
            "transmission": "Auto",
            "colour": "White",
            "photo_urls": ["https://cdn.example.com/kenji.jpg"],
            "public_profile": True,
            "featured": False,
            "created_at": "2024-04-10T18:30:00Z",
        },
        {
            "id": "3",
            "user_id": "u3",
            "display_name": "Private Pat",
            "username": "pat",
            "country": "Germany",
            "year": 2015,
            "transmission": "Manual",
            "colour": "Red",
            "public_profile": False,
            "created_at": "2024-05-01T08:00:00Z",
        },
        {
            "id": "4",
            "display_name": "No Username",
            "country": "France",
            "year": 2016,
            "transmission": "Auto",
            "colour": "Grey",
            "public_profile": True,
        },
    ]
