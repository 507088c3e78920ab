"""
Menu Filter Service
Applies the access policy to the static menu definition, producing an
order-preserving, access-annotated subset.

A leaf survives iff its access level is not "none"; a group survives iff at
least one of its children survives. Filtering an already filtered menu
returns an equal menu.
"""
import logging
from functools import lru_cache
from typing import Dict, List, Mapping, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from navaccess.config.menu import MENU_DEFINITION
from navaccess.errors import ConfigurationError
from navaccess.schemas.navigation import (
    MenuLeaf,
    MenuGroup,
    MenuNode,
    AnnotatedLeaf,
    AnnotatedGroup,
    AnnotatedNode,
)
from navaccess.services.access_policy import AccessPolicy, RoleLike, get_access_policy

logger = logging.getLogger(__name__)

MenuDefinition = Dict[str, List[MenuNode]]

_definition_adapter = TypeAdapter(MenuDefinition)


def validate_menu(definition: Mapping[str, Sequence[MenuNode]]) -> None:
    """
    Reject malformed menus before they are used.

    Raises:
        ConfigurationError: empty list id, leaf with empty path, or group
            with no children
    """
    for list_id, nodes in definition.items():
        if not list_id:
            raise ConfigurationError("Menu list id must not be empty")
        for index, node in enumerate(nodes):
            where = f"{list_id}[{index}] ({node.name!r})"
            if isinstance(node, MenuGroup):
                if not node.children:
                    raise ConfigurationError(f"Group {where} has no children")
                for child in node.children:
                    if not child.path:
                        raise ConfigurationError(f"Leaf {child.name!r} in group {where} has an empty path")
            elif not node.path:
                raise ConfigurationError(f"Leaf {where} has an empty path")


def build_menu_definition(raw: Optional[Mapping] = None) -> MenuDefinition:
    """Parse and validate a menu definition (defaults to the built-in sidebar)."""
    try:
        definition = _definition_adapter.validate_python(MENU_DEFINITION if raw is None else raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid menu definition: {e}") from e

    validate_menu(definition)
    return definition


@lru_cache()
def get_menu_definition() -> MenuDefinition:
    """Process-wide menu definition, built once"""
    return build_menu_definition()


def _annotate_leaf(
    leaf: MenuLeaf,
    position: int,
    role: RoleLike,
    policy: AccessPolicy,
) -> Optional[AnnotatedLeaf]:
    access = policy.lookup(role, leaf.path)
    if not access.visible:
        return None

    return AnnotatedLeaf(
        name=leaf.name,
        path=leaf.path,
        icon=leaf.icon,
        new=leaf.new,
        pro=leaf.pro,
        access=access,
        badge=policy.badge(access),
        position=position,
    )


def _position(node: Union[MenuNode, AnnotatedNode], index: int) -> int:
    # Annotated nodes keep the position they had in the definition
    if isinstance(node, (AnnotatedLeaf, AnnotatedGroup)):
        return node.position
    return index


def filter_menu(
    nodes: Sequence[Union[MenuNode, AnnotatedNode]],
    role: RoleLike,
    policy: Optional[AccessPolicy] = None,
) -> List[AnnotatedNode]:
    """
    Filter one menu list for a role.

    Args:
        nodes: definition nodes or a previously filtered list
        role: role to filter for; unknown roles see nothing
        policy: access policy (defaults to the process-wide one)

    Returns:
        Visible nodes in definition order, annotated with access levels
    """
    policy = policy or get_access_policy()
    filtered: List[AnnotatedNode] = []

    for index, node in enumerate(nodes):
        position = _position(node, index)

        if isinstance(node, (MenuGroup, AnnotatedGroup)):
            children = []
            for child_index, child in enumerate(node.children):
                annotated = _annotate_leaf(child, _position(child, child_index), role, policy)
                if annotated is not None:
                    children.append(annotated)

            if children:
                filtered.append(AnnotatedGroup(
                    name=node.name,
                    icon=node.icon,
                    position=position,
                    children=children,
                ))
        else:
            annotated = _annotate_leaf(node, position, role, policy)
            if annotated is not None:
                filtered.append(annotated)

    return filtered


def filter_definition(
    definition: Mapping[str, Sequence[Union[MenuNode, AnnotatedNode]]],
    role: RoleLike,
    policy: Optional[AccessPolicy] = None,
) -> Dict[str, List[AnnotatedNode]]:
    """Filter every list of a menu definition, keeping list order."""
    policy = policy or get_access_policy()
    return {
        list_id: filter_menu(nodes, role, policy)
        for list_id, nodes in definition.items()
    }
