"""
Active route tracking over a filtered menu.
"""
from typing import Mapping, Optional, Sequence, Union

from navaccess.schemas.navigation import AnnotatedGroup, AnnotatedNode, ActiveRoute, GroupRef, MenuGroup, MenuNode
from navaccess.services.access_policy import AccessPolicy, RoleLike, get_access_policy


def locate(
    menus: Mapping[str, Sequence[Union[MenuNode, AnnotatedNode]]],
    role: RoleLike,
    current_path: Optional[str],
    policy: Optional[AccessPolicy] = None,
) -> ActiveRoute:
    """
    Find the leaf matching the current route and the group containing it.

    Leaf paths and the current path go through the same normalization. Lists
    are scanned in order, depth-first; the first match wins. No match (or no
    current path) yields an empty ActiveRoute. Unfiltered definition lists are
    accepted too; their groups are identified by their index in the list.
    """
    policy = policy or get_access_policy()
    target = policy.resolve_path(role, current_path)
    if target is None:
        return ActiveRoute()

    for list_id, nodes in menus.items():
        for index, node in enumerate(nodes):
            if isinstance(node, (MenuGroup, AnnotatedGroup)):
                position = node.position if isinstance(node, AnnotatedGroup) else index
                for child in node.children:
                    if policy.resolve_path(role, child.path) == target:
                        return ActiveRoute(
                            active_leaf=target,
                            containing_group=GroupRef(list_id=list_id, index=position),
                        )
            elif policy.resolve_path(role, node.path) == target:
                return ActiveRoute(active_leaf=target)

    return ActiveRoute()
