"""
Navigation Engine
Wires the role store and router to the access pipeline:

    role/route signal -> access policy -> menu filter -> active route
                      -> submenu controller -> NavigationSnapshot

Every pass reads the role and the path once and computes the whole snapshot
from that pair. Signals raised while a pass is running (for example by a
subscriber that navigates) are queued and handled after it, in order.
"""
import logging
from typing import Callable, List, Optional, Tuple

from navaccess.errors import CollaboratorUnavailable
from navaccess.models.role import Role
from navaccess.schemas.navigation import NavigationSnapshot, GroupRef
from navaccess.services.access_policy import AccessPolicy, get_access_policy
from navaccess.services.active_route import locate
from navaccess.services.menu_filter import (
    MenuDefinition,
    filter_definition,
    get_menu_definition,
    validate_menu,
)
from navaccess.services.role_store import RoleStore
from navaccess.services.route_store import Router
from navaccess.services.submenu_controller import SubmenuExpansionController, HeightMeasurer
from navaccess.utils.signals import Signal, Listener, Unsubscribe

logger = logging.getLogger(__name__)


class NavigationEngine:
    """Keeps the sidebar state consistent with the current role and route"""

    def __init__(
        self,
        role_store: RoleStore,
        router: Router,
        policy: Optional[AccessPolicy] = None,
        definition: Optional[MenuDefinition] = None,
        measure_height: Optional[HeightMeasurer] = None,
    ):
        if definition is None:
            definition = get_menu_definition()
        else:
            validate_menu(definition)

        self._role_store = role_store
        self._router = router
        self._policy = policy or get_access_policy()
        self._definition = definition
        # Heights are read after the snapshot holding the open group is published
        self._controller = SubmenuExpansionController(measure_height, defer_measurement=True)

        self._snapshot = NavigationSnapshot()
        self._changed = Signal()
        self._unsubscribers: List[Unsubscribe] = []
        self._running = False
        self._queue: List[Callable[[], NavigationSnapshot]] = []

    @property
    def snapshot(self) -> NavigationSnapshot:
        return self._snapshot

    @property
    def controller(self) -> SubmenuExpansionController:
        return self._controller

    def start(self) -> "NavigationEngine":
        """Subscribe to both signals and compute the initial snapshot."""
        if not self._unsubscribers:
            self._unsubscribers = [
                self._role_store.subscribe(self._on_signal),
                self._router.subscribe(self._on_signal),
            ]
            self.recompute()
        return self

    def stop(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Be notified after every published snapshot."""
        return self._changed.subscribe(listener)

    def recompute(self) -> NavigationSnapshot:
        """Run the full pipeline against the stores' current values."""
        return self._run(self._compute)

    def toggle(self, list_id: str, index: int) -> NavigationSnapshot:
        """Manual expand/collapse from the rendering layer."""

        def toggled() -> NavigationSnapshot:
            self._controller.toggle(list_id, index)
            return self._with_heights(open_group=self._controller.state)

        return self._run(toggled)

    def is_active(self, path: str) -> bool:
        """Whether a menu path is the active leaf of the current snapshot"""
        snapshot = self._snapshot
        if snapshot.active.active_leaf is None:
            return False
        return self._policy.resolve_path(snapshot.role, path) == snapshot.active.active_leaf

    def target_height(self, ref: GroupRef) -> int:
        return self._controller.target_height(ref)

    def _on_signal(self) -> None:
        self.recompute()

    def _run(self, build: Callable[[], NavigationSnapshot]) -> NavigationSnapshot:
        self._queue.append(build)
        if self._running:
            # Handled by the pass in progress once it has published
            return self._snapshot

        self._running = True
        try:
            while self._queue:
                self._publish(self._queue.pop(0)())
        finally:
            self._running = False
            self._queue.clear()

        return self._snapshot

    def _publish(self, snapshot: NavigationSnapshot) -> None:
        self._snapshot = snapshot
        self._changed.emit()

        # A queued change replaces this state; its own publish measures
        if self._queue:
            return
        if self._controller.measure_pending():
            self._snapshot = self._with_heights()
            self._changed.emit()

    def _with_heights(self, **update) -> NavigationSnapshot:
        update["target_heights"] = self._controller.target_heights()
        return self._snapshot.model_copy(update=update)

    def _read_role(self) -> Tuple[Optional[Role], bool]:
        try:
            return self._role_store.get(), False
        except CollaboratorUnavailable as e:
            logger.warning(f"{e}; denying all navigation")
            return None, True

    def _read_path(self) -> Tuple[Optional[str], bool]:
        try:
            path = self._router.current_path()
        except CollaboratorUnavailable as e:
            logger.warning(f"{e}; treating route as unmatched")
            return None, True

        if not isinstance(path, str):
            logger.warning(f"Router returned {path!r}; treating route as unmatched")
            return None, True
        return path, False

    def _compute(self) -> NavigationSnapshot:
        role, role_failed = self._read_role()
        path, path_failed = self._read_path()

        degraded = role_failed or path_failed
        if degraded:
            # Least privilege: nobody's menu, nothing active
            role, path = None, None

        menus = filter_definition(self._definition, role, self._policy)
        active = locate(menus, role, path, self._policy)
        self._controller.on_route_or_role_change(active.containing_group)

        logger.debug(
            f"Navigation recomputed for role={role.value if role else None} path={path} "
            f"active={active.active_leaf} open={self._controller.state}"
        )

        return NavigationSnapshot(
            role=role,
            current_path=path,
            resolved_path=self._policy.resolve_path(role, path),
            menus=menus,
            active=active,
            open_group=self._controller.state,
            target_heights=self._controller.target_heights(),
            degraded=degraded,
        )


def compute_navigation(
    role_store: RoleStore,
    router: Router,
    policy: Optional[AccessPolicy] = None,
    definition: Optional[MenuDefinition] = None,
    measure_height: Optional[Callable[[GroupRef], int]] = None,
) -> NavigationSnapshot:
    """One-shot snapshot for a (role, path) pair without keeping subscriptions."""
    engine = NavigationEngine(
        role_store,
        router,
        policy=policy,
        definition=definition,
        measure_height=measure_height,
    )
    snapshot = engine.start().snapshot
    engine.stop()
    return snapshot
