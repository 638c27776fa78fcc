import os
import secrets
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Header, HTTPException, status

from registry.adapters.json_source import JsonProfileSource, JsonSettingsSource
from registry.components.badges import build_catalogue
from registry.components.profiles import drop_duplicate_usernames, normalize_rows
from registry.components.settings import SettingsStore
from registry.components.views import ViewContext
from registry.domain.entities import ProfileRecord
from registry.ports.source import ProfileSourcePort
from registry.rules.loader import load_rules
from registry.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("REGISTRY_DATA_DIR", "./data"))
        self.owners_path = self.data_dir / "owners.json"
        self.site_content_path = self.data_dir / "site_content.json"
        self.rules_path = Path(
            os.environ.get("REGISTRY_RULES_PATH", str(self.base_dir / "registry.yaml"))
        )
        self.admin_token = os.environ.get("REGISTRY_ADMIN_TOKEN", "")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Sources ---
def get_profile_source(settings: Settings = Depends(get_settings)) -> ProfileSourcePort:
    return JsonProfileSource(settings.owners_path)


@lru_cache
def get_settings_store(settings: Settings = Depends(get_settings)) -> SettingsStore:
    return SettingsStore(JsonSettingsSource(settings.site_content_path))


# --- Records ---
def get_records(
    source: ProfileSourcePort = Depends(get_profile_source),
    rules: Rules = Depends(get_rules),
) -> tuple[ProfileRecord, ...]:
    """Fresh fetch + normalize per request."""
    batch = normalize_rows(source.fetch_rows(), rules.profile)
    return drop_duplicate_usernames(batch.records)


# --- Context ---
def get_view_context(
    rules: Rules = Depends(get_rules),
    store: SettingsStore = Depends(get_settings_store),
) -> ViewContext:
    return ViewContext(
        settings=store.get(),
        is_admin=False,
        region_country=rules.profile.region_country,
        catalogue=build_catalogue(rules.badges),
    )


def require_admin(
    x_admin_token: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    if not settings.admin_token or not x_admin_token:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    if not secrets.compare_digest(x_admin_token, settings.admin_token):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")


def get_admin_context(
    _: None = Depends(require_admin),
    ctx: ViewContext = Depends(get_view_context),
) -> ViewContext:
    return ViewContext(
        settings=ctx.settings,
        is_admin=True,
        region_country=ctx.region_country,
        catalogue=ctx.catalogue,
    )
