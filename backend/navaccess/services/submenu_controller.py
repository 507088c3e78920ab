"""
Submenu expansion state machine.

State is either closed (None) or a single open group, across all menu lists.
Route/role driven transitions always override a manual toggle, including
closing a manually opened group when the new route matches no leaf.
"""
import logging
from typing import Callable, Dict, Optional

from navaccess.schemas.navigation import GroupRef

logger = logging.getLogger(__name__)

HeightMeasurer = Callable[[GroupRef], int]


class SubmenuExpansionController:
    """Accordion state for sidebar groups"""

    def __init__(self, measure_height: Optional[HeightMeasurer] = None, defer_measurement: bool = False):
        """
        Args:
            measure_height: reads the rendered body height of a group; called
                after an open state has been committed
            defer_measurement: leave the read to measure_pending(), for owners
                that publish the new state before it can be measured
        """
        self._state: Optional[GroupRef] = None
        self._measure_height = measure_height
        self._defer_measurement = defer_measurement
        self._unmeasured: Optional[GroupRef] = None
        self._heights: Dict[GroupRef, int] = {}

    @property
    def state(self) -> Optional[GroupRef]:
        return self._state

    def is_open(self, list_id: str, index: int) -> bool:
        return self._state == GroupRef(list_id=list_id, index=index)

    def toggle(self, list_id: str, index: int) -> Optional[GroupRef]:
        """Close the group if it is open, otherwise open it (closing any other)."""
        ref = GroupRef(list_id=list_id, index=index)
        self._commit(None if self._state == ref else ref)
        return self._state

    def on_route_or_role_change(self, containing_group: Optional[GroupRef]) -> Optional[GroupRef]:
        """Force the state to the group holding the active leaf, or closed."""
        if containing_group is None and self._state is not None:
            logger.debug(f"Closing submenu {self._state.key}: no active leaf in any group")
        self._commit(containing_group)
        return self._state

    def measure_pending(self) -> bool:
        """
        Read the height of the group opened by the last commit, if it is still
        open and has not been measured yet.

        Returns:
            True when a height was read
        """
        ref, self._unmeasured = self._unmeasured, None
        if ref is None or ref != self._state:
            return False
        self._heights[ref] = self._read_height(ref)
        return True

    def target_height(self, ref: GroupRef) -> int:
        """Height the group body should animate to; zero unless it is open"""
        if self._state != ref:
            return 0
        return self._heights.get(ref, 0)

    def target_heights(self) -> Dict[str, int]:
        """Target height for every group measured so far, keyed "list-index" """
        return {ref.key: self.target_height(ref) for ref in self._heights}

    def _commit(self, new_state: Optional[GroupRef]) -> None:
        self._state = new_state
        self._unmeasured = None
        if new_state is None:
            return

        if self._measure_height is None:
            self._heights[new_state] = 0
        elif self._defer_measurement:
            self._unmeasured = new_state
        else:
            # Measured only once the new state is in place
            self._heights[new_state] = self._read_height(new_state)

    def _read_height(self, ref: GroupRef) -> int:
        if self._measure_height is None:
            return 0
        try:
            return max(0, int(self._measure_height(ref)))
        except Exception as e:
            logger.warning(f"Could not measure submenu {ref.key}: {e}")
            return 0
