"""
Models package
"""
from navaccess.models.role import Role, AccessLevel

__all__ = [
    "Role",
    "AccessLevel",
]
