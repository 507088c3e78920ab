"""
Navigation API
Read-only views of the navigation access policy. Nothing here enforces
permissions; it reports what the sidebar would show for a role and route.
"""
import logging

from fastapi import APIRouter, Depends, Query

from navaccess.config import settings
from navaccess.dependencies import get_policy, get_definition, get_requested_role
from navaccess.services.access_policy import AccessPolicy, coerce_role
from navaccess.services.menu_filter import MenuDefinition
from navaccess.services.navigation_engine import compute_navigation
from navaccess.services.role_store import InMemoryRoleStore
from navaccess.services.route_store import InMemoryRouter
from navaccess.schemas.navigation import (
    RoleInfo,
    RoleListResponse,
    PolicyMatrixResponse,
    AccessLookupResponse,
    MenuResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/roles", response_model=RoleListResponse)
async def list_roles(policy: AccessPolicy = Depends(get_policy)):
    """All roles with their home dashboards."""
    roles = [
        RoleInfo(role=role.value, home_path=policy.home_path(role))
        for role in policy.roles()
    ]
    return RoleListResponse(roles=roles, default_role=settings.DEFAULT_ROLE)


@router.get("/matrix", response_model=PolicyMatrixResponse)
async def get_policy_matrix(policy: AccessPolicy = Depends(get_policy)):
    """The full role x path access table and badge labels."""
    return PolicyMatrixResponse(matrix=policy.matrix(), badges=policy.badges())


@router.get("/access", response_model=AccessLookupResponse)
async def lookup_access(
    path: str = Query(..., description="Route to resolve"),
    role: str = Depends(get_requested_role),
    policy: AccessPolicy = Depends(get_policy),
):
    """Resolve a single (role, path) pair."""
    level = policy.lookup(role, path)
    known = coerce_role(role)
    return AccessLookupResponse(
        role=role,
        path=path,
        resolved_path=policy.resolve_path(known, path) if known else None,
        access=level,
        visible=level.visible,
        badge=policy.badge(level),
    )


@router.get("/menu", response_model=MenuResponse)
async def get_menu(
    path: str = Query("/", description="Current route"),
    role: str = Depends(get_requested_role),
    policy: AccessPolicy = Depends(get_policy),
    definition: MenuDefinition = Depends(get_definition),
):
    """
    Annotated menu for a role and route, with the active leaf and the group
    the sidebar opens for it.
    """
    known = coerce_role(role)
    if known is None:
        logger.info(f"Menu requested for unknown role {role!r}; returning deny-all")

    snapshot = compute_navigation(
        InMemoryRoleStore(role=role),
        InMemoryRouter(path),
        policy=policy,
        definition=definition,
    )

    return MenuResponse(
        role=role,
        path=path,
        known_role=known is not None,
        menus=snapshot.menus,
        active_leaf=snapshot.active.active_leaf,
        containing_group=snapshot.active.containing_group,
        open_group=snapshot.open_group,
    )
