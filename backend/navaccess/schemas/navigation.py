"""
Navigation Schemas
"""
from typing import Optional, List, Dict, Union, Literal
from pydantic import BaseModel

from navaccess.models.role import Role, AccessLevel


class MenuLeaf(BaseModel):
    """Addressable navigation entry"""
    kind: Literal["leaf"] = "leaf"
    name: str
    path: str
    icon: Optional[str] = None
    new: bool = False
    pro: bool = False

    class Config:
        frozen = True


class MenuGroup(BaseModel):
    """Non-addressable container of leaves (one level deep)"""
    kind: Literal["group"] = "group"
    name: str
    icon: Optional[str] = None
    children: List[MenuLeaf]

    class Config:
        frozen = True


MenuNode = Union[MenuLeaf, MenuGroup]


class AnnotatedLeaf(MenuLeaf):
    """Leaf that survived filtering, with its resolved access level"""
    access: AccessLevel
    badge: Optional[str] = None
    position: int  # index within its definition list or group


class AnnotatedGroup(BaseModel):
    """Group with at least one visible child"""
    kind: Literal["group"] = "group"
    name: str
    icon: Optional[str] = None
    position: int
    children: List[AnnotatedLeaf]

    class Config:
        frozen = True


AnnotatedNode = Union[AnnotatedLeaf, AnnotatedGroup]


class GroupRef(BaseModel):
    """Identity of a group across all navigation lists"""
    list_id: str
    index: int

    class Config:
        frozen = True

    @property
    def key(self) -> str:
        return f"{self.list_id}-{self.index}"


class ActiveRoute(BaseModel):
    """Result of matching the current route against a filtered menu"""
    active_leaf: Optional[str] = None
    containing_group: Optional[GroupRef] = None

    class Config:
        frozen = True


class NavigationSnapshot(BaseModel):
    """Everything the rendering layer needs for one (role, path) pair"""
    role: Optional[Role] = None
    current_path: Optional[str] = None
    resolved_path: Optional[str] = None
    menus: Dict[str, List[Union[AnnotatedLeaf, AnnotatedGroup]]] = {}
    active: ActiveRoute = ActiveRoute()
    open_group: Optional[GroupRef] = None
    target_heights: Dict[str, int] = {}
    degraded: bool = False  # a collaborator failed and deny-all was applied

    class Config:
        frozen = True


# API responses

class RoleInfo(BaseModel):
    role: str
    home_path: str


class RoleListResponse(BaseModel):
    roles: List[RoleInfo]
    default_role: str


class PolicyMatrixResponse(BaseModel):
    matrix: Dict[str, Dict[str, str]]
    badges: Dict[str, str]


class AccessLookupResponse(BaseModel):
    role: str
    path: str
    resolved_path: Optional[str] = None
    access: AccessLevel
    visible: bool
    badge: Optional[str] = None


class MenuResponse(BaseModel):
    role: str
    path: Optional[str] = None
    known_role: bool
    menus: Dict[str, List[Union[AnnotatedLeaf, AnnotatedGroup]]]
    active_leaf: Optional[str] = None
    containing_group: Optional[GroupRef] = None
    open_group: Optional[GroupRef] = None
