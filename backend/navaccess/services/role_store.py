"""
Role Store
Holds the signed-in user's role and notifies subscribers when it changes.
Persistence and cross-tab propagation belong to whoever feeds ``set``.
"""
import logging
from typing import Optional, Protocol, Union

from navaccess.config import settings
from navaccess.errors import CollaboratorUnavailable, ConfigurationError
from navaccess.models.role import Role
from navaccess.services.access_policy import coerce_role
from navaccess.utils.signals import Signal, Listener, Unsubscribe

logger = logging.getLogger(__name__)


class RoleStore(Protocol):
    def get(self) -> Role: ...

    def subscribe(self, listener: Listener) -> Unsubscribe: ...


class InMemoryRoleStore:
    """RoleStore backed by a single stored role identifier"""

    def __init__(self, default_role: Union[Role, str, None] = None, role: Union[Role, str, None] = None):
        fallback = coerce_role(default_role if default_role is not None else settings.DEFAULT_ROLE)
        if fallback is None:
            raise ConfigurationError(f"Unknown default role: {default_role or settings.DEFAULT_ROLE}")

        self._default_role = fallback
        self._value: Optional[str] = self._raw(role)
        self._changed = Signal()

    @property
    def default_role(self) -> Role:
        return self._default_role

    def get(self) -> Role:
        """
        Current role, or the fallback role while unset.

        Raises:
            CollaboratorUnavailable: the stored identifier is not a known role
        """
        if self._value is None:
            return self._default_role

        role = coerce_role(self._value)
        if role is None:
            raise CollaboratorUnavailable("RoleStore", f"unrecognised role {self._value!r}")
        return role

    def set(self, role: Union[Role, str, None]) -> None:
        """Store a role identifier; subscribers are notified only on change."""
        value = self._raw(role)
        if value == self._value:
            return

        logger.debug(f"Role changed from {self._value} to {value}")
        self._value = value
        self._changed.emit()

    def clear(self) -> None:
        self.set(None)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._changed.subscribe(listener)

    @staticmethod
    def _raw(role: Union[Role, str, None]) -> Optional[str]:
        if isinstance(role, Role):
            return role.value
        return role
