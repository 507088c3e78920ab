"""
Common Dependencies for FastAPI Routes
"""
from typing import Optional

from fastapi import Query

from navaccess.config import settings
from navaccess.services.access_policy import AccessPolicy, get_access_policy
from navaccess.services.menu_filter import MenuDefinition, get_menu_definition


def get_policy() -> AccessPolicy:
    """Dependency returning the process-wide access policy"""
    return get_access_policy()


def get_definition() -> MenuDefinition:
    """Dependency returning the validated menu definition"""
    return get_menu_definition()


async def get_requested_role(
    role: Optional[str] = Query(None, description="Role identifier; the configured default role when omitted"),
) -> str:
    """
    Raw role identifier from the query string.
    Unknown identifiers are passed through so that callers answer them with
    deny-all results instead of an error.
    """
    if role is None or not role.strip():
        return settings.DEFAULT_ROLE
    return role.strip()
