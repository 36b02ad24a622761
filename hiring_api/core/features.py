"""Feature flag lookup backed by application settings."""

from typing import Dict

from hiring_api.core.config import Settings, settings

HIRED = "Hired"
ENABLE_ROLE_POSTING = "EnableRolePosting"
REQUIRE_ROLE_APPROVAL = "RequireRoleApproval"
SHOW_EXPIRED_ROLES = "ShowExpiredRoles"

# Flag name -> settings attribute
FLAG_SETTINGS: Dict[str, str] = {
    HIRED: "FEATURE_HIRED",
    ENABLE_ROLE_POSTING: "FEATURE_ENABLE_ROLE_POSTING",
    REQUIRE_ROLE_APPROVAL: "FEATURE_REQUIRE_ROLE_APPROVAL",
    SHOW_EXPIRED_ROLES: "FEATURE_SHOW_EXPIRED_ROLES",
}


class FeatureFlags:
    """Resolves named feature flags to plain booleans."""

    def __init__(self, source: Settings):
        self._source = source

    def is_enabled(self, name: str) -> bool:
        """Return the flag's state; unknown names are disabled."""
        attr = FLAG_SETTINGS.get(name)
        if attr is None:
            return False
        return bool(getattr(self._source, attr, False))

    def as_dict(self) -> Dict[str, bool]:
        return {name: self.is_enabled(name) for name in FLAG_SETTINGS}


def get_feature_flags() -> FeatureFlags:
    """FastAPI dependency returning flags for the current settings."""
    return FeatureFlags(settings)
