"""
Access Policy Service
Resolves (role, path) pairs to access levels from the declarative table in
navaccess.config.access_policy.

Paths are normalized before every lookup:
  1. "/" is the role-home sentinel and is replaced by the role's home path.
  2. Anything under "/dashboard" collapses to "/dashboard".

Lookups are deny-by-default: unknown roles and unlisted paths resolve to
AccessLevel.NONE and never raise.
"""
import json
import logging
from functools import lru_cache
from typing import Dict, Mapping, Optional, Union

from pydantic import TypeAdapter, ValidationError

from navaccess.config import settings
from navaccess.config.access_policy import ACCESS_TABLE, ROLE_HOME, ACCESS_BADGES
from navaccess.errors import ConfigurationError
from navaccess.models.role import Role, AccessLevel

logger = logging.getLogger(__name__)

HOME_SENTINEL = "/"
DASHBOARD_PREFIX = "/dashboard"

RoleLike = Union[Role, str, None]

_table_adapter = TypeAdapter(Dict[Role, Dict[str, AccessLevel]])


def normalize_path(path: str) -> str:
    """Collapse dashboard sub-routes onto the single /dashboard rule."""
    if path.startswith(DASHBOARD_PREFIX):
        return DASHBOARD_PREFIX
    return path


def coerce_role(value: RoleLike) -> Optional[Role]:
    """Map a raw role identifier to Role, or None if it is not recognised."""
    if isinstance(value, Role):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Role(value)
    except ValueError:
        pass
    # Accept member names as well as stored values ("SALES" / "SALES_TEAM")
    return Role.__members__.get(value)


def load_access_table(path: str) -> Dict[Role, Dict[str, AccessLevel]]:
    """
    Load an access table from a JSON file shaped {role: {path: level}}.

    Raises:
        ConfigurationError: file unreadable or not a valid table
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Cannot read access policy file {path}: {e}") from e

    try:
        return _table_adapter.validate_python(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid access policy file {path}: {e}") from e


class AccessPolicy:
    """Read-only (role, path) -> AccessLevel lookup"""

    def __init__(
        self,
        table: Optional[Mapping] = None,
        homes: Optional[Mapping] = None,
        badges: Optional[Mapping[str, str]] = None,
    ):
        try:
            self._table = _table_adapter.validate_python(ACCESS_TABLE if table is None else table)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid access table: {e}") from e

        self._homes: Dict[Role, str] = {}
        for role, home in (ROLE_HOME if homes is None else homes).items():
            known = coerce_role(role)
            if known is None:
                raise ConfigurationError(f"Home path configured for unknown role: {role}")
            if not home:
                raise ConfigurationError(f"Empty home path for role {known.value}")
            self._homes[known] = home

        missing = [role.value for role in Role if role not in self._homes]
        if missing:
            raise ConfigurationError(f"Roles without a home path: {', '.join(missing)}")

        try:
            self._badges = {
                AccessLevel(level): label
                for level, label in (ACCESS_BADGES if badges is None else badges).items()
            }
        except ValueError as e:
            raise ConfigurationError(f"Badge configured for unknown access level: {e}") from e

    def home_path(self, role: RoleLike) -> Optional[str]:
        """Home dashboard for a role, None for unknown roles"""
        known = coerce_role(role)
        if known is None:
            return None
        return self._homes[known]

    def resolve_path(self, role: RoleLike, path: Optional[str]) -> Optional[str]:
        """Apply sentinel substitution then dashboard normalization."""
        if not isinstance(path, str):
            return None
        if path == HOME_SENTINEL:
            path = self.home_path(role) or path
        return normalize_path(path)

    def lookup(self, role: RoleLike, path: Optional[str]) -> AccessLevel:
        known = coerce_role(role)
        if known is None:
            return AccessLevel.NONE

        resolved = self.resolve_path(known, path)
        if resolved is None:
            return AccessLevel.NONE

        return self._table.get(known, {}).get(resolved, AccessLevel.NONE)

    def badge(self, level: AccessLevel) -> Optional[str]:
        """Presentation label for an access level, None when unbadged"""
        return self._badges.get(level)

    def roles(self):
        return list(self._homes.keys())

    def matrix(self) -> Dict[str, Dict[str, str]]:
        """The table as plain strings, for API responses"""
        return {
            role.value: {path: level.value for path, level in paths.items()}
            for role, paths in self._table.items()
        }

    def badges(self) -> Dict[str, str]:
        return {level.value: label for level, label in self._badges.items()}


@lru_cache()
def get_access_policy() -> AccessPolicy:
    """Process-wide policy, built once from config"""
    if settings.ACCESS_POLICY_FILE:
        logger.info(f"Loading access policy from {settings.ACCESS_POLICY_FILE}")
        return AccessPolicy(table=load_access_table(settings.ACCESS_POLICY_FILE))
    return AccessPolicy()
