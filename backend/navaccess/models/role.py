"""
Role and Access Level enums for navigation access control
"""
import enum


class Role(str, enum.Enum):
    """User roles recognised by the navigation policy"""
    SUPER_ADMIN = "SUPER_ADMIN"
    OPS_TEAM = "OPS_TEAM"
    PRICING_MANAGER = "PRICING_MANAGER_VENDOR_SHIPLINE"
    CUSTOMER = "CUSTOMER_ORDER_CREATOR"
    SALES = "SALES_TEAM"
    END_CUSTOMER = "END_CUSTOMER"


class AccessLevel(str, enum.Enum):
    """Permission granularity for a (role, route) pair"""
    FULL = "full"
    VIEW = "view"
    RATE = "rate"
    RAISE = "raise"
    ADMIN = "admin"
    NONE = "none"

    @property
    def visible(self) -> bool:
        """Anything except NONE is shown in the navigation"""
        return self is not AccessLevel.NONE
