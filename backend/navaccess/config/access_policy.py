"""
Access policy registry — single source of truth for which role sees which
route, at what access level, plus each role's home dashboard.

Any (role, path) pair missing here resolves to "none".
"""
from navaccess.models.role import Role

ROLE_HOME = {
    Role.SUPER_ADMIN:     "/dashboard",
    Role.OPS_TEAM:        "/ops/dashboard",
    Role.PRICING_MANAGER: "/dashboard",
    Role.CUSTOMER:        "/dashboard",
    Role.SALES:           "/sales/dashboard",
    Role.END_CUSTOMER:    "/user/dashboard",
}

# Badge text per access level; "full" and "none" carry no badge
ACCESS_BADGES = {
    "view":  "view",
    "rate":  "rate-related",
    "raise": "raise only",
    "admin": "admin",
}

ACCESS_TABLE = {
    Role.SUPER_ADMIN: {
        "/dashboard": "full",

        # Platform administration
        "/admin/users":                      "full",
        "/admin/vendor-subscriptions":       "full",
        "/admin/platform-settings":          "full",
        "/admin/vendors-and-subscriptions":  "full",
        "/admin/saas-pricing-plans":         "full",
        "/admin/analytics-activities":       "full",
        "/admin/security-permissions":       "full",

        # Vendors
        "/vendor/vendors-approvals":    "full",
        "/vendor/vendor-orders":        "full",
        "/vendor/shipments/execution":  "full",

        # Pricing
        "/pricing/upload":     "full",
        "/pricing/api":        "full",
        "/pricing/compare":    "full",
        "/pricing/selection":  "full",
        "/pricing/dashboard":  "full",

        # Freight
        "/rates/compare":           "full",
        "/rates/shipment-details":  "full",
        "/rates/bookings":          "full",
        "/rates/book":              "full",

        # Tracking
        "/operations/tracking":    "full",
        "/operations/exceptions":  "full",

        "/notifications": "full",

        # Billing
        "/billing/invoices":      "full",
        "/billing/payments":      "full",
        "/billing/disputes":      "full",
        "/billing/subscription":  "full",

        # CMS
        "/cms/articles":   "admin",
        "/cms/knowledge":  "full",

        # Analytics
        "/analytics/user-activity":       "full",
        "/analytics/revenue":             "full",
        "/analytics/booking-trends":      "full",
        "/analytics/vendor-performance":  "full",

        "/signin": "full",
        "/signup": "full",
    },

    Role.OPS_TEAM: {
        "/ops/dashboard": "full",
        "/dashboard":     "none",

        "/vendor/vendors-approvals":    "full",
        "/vendor/vendor-orders":        "full",
        "/vendor/shipments/execution":  "full",

        "/pricing/upload":     "none",
        "/pricing/api":        "none",
        "/pricing/compare":    "none",
        "/pricing/selection":  "none",
        "/pricing/dashboard":  "none",

        "/rates/compare":           "none",
        "/rates/shipment-details":  "none",
        "/rates/bookings":          "none",
        "/rates/book":              "none",

        "/operations/tracking":    "full",
        "/operations/exceptions":  "full",

        "/notifications": "full",

        "/billing/invoices":      "none",
        "/billing/payments":      "none",
        "/billing/disputes":      "none",
        "/billing/subscription":  "none",

        "/cms/articles":   "none",
        "/cms/knowledge":  "none",

        "/analytics/user-activity":       "none",
        "/analytics/revenue":             "none",
        "/analytics/booking-trends":      "none",
        "/analytics/vendor-performance":  "none",

        "/signin": "none",
        "/signup": "none",
    },

    Role.PRICING_MANAGER: {
        "/dashboard": "full",

        "/vendor/vendors-approvals":    "none",
        "/vendor/vendor-orders":        "none",
        "/vendor/shipments/execution":  "none",

        # API price fetching is not offered to pricing managers
        "/pricing/upload":     "full",
        "/pricing/api":        "none",
        "/pricing/compare":    "full",
        "/pricing/selection":  "full",
        "/pricing/dashboard":  "full",

        "/rates/compare":           "view",
        "/rates/shipment-details":  "none",
        "/rates/bookings":          "none",
        "/rates/book":              "none",

        "/operations/tracking": "full",

        "/notifications": "rate",

        "/billing/invoices":      "none",
        "/billing/payments":      "full",
        "/billing/disputes":      "none",
        "/billing/subscription":  "none",

        "/cms/articles":   "none",
        "/cms/knowledge":  "full",

        "/analytics/user-activity":       "none",
        "/analytics/revenue":             "none",
        "/analytics/booking-trends":      "none",
        "/analytics/vendor-performance":  "none",

        "/signin": "none",
        "/signup": "none",
    },

    Role.CUSTOMER: {
        "/dashboard": "full",

        "/vendor/vendors-approvals":    "full",
        "/vendor/vendor-orders":        "full",
        "/vendor/shipments/execution":  "full",

        "/pricing/upload":     "none",
        "/pricing/api":        "none",
        "/pricing/compare":    "none",
        "/pricing/selection":  "none",
        "/pricing/dashboard":  "none",

        "/rates/compare":           "full",
        "/rates/shipment-details":  "full",
        "/rates/bookings":          "full",
        "/rates/book":              "full",

        "/operations/tracking": "full",

        "/notifications": "full",

        "/billing/invoices":      "full",
        "/billing/payments":      "full",
        "/billing/disputes":      "raise",
        "/billing/subscription":  "full",

        "/cms/articles":   "none",
        "/cms/knowledge":  "full",

        "/analytics/user-activity":       "none",
        "/analytics/revenue":             "none",
        "/analytics/booking-trends":      "none",
        "/analytics/vendor-performance":  "none",

        "/signin": "none",
        "/signup": "none",
    },

    Role.END_CUSTOMER: {
        "/user/dashboard":  "full",
        "/quoterate/book":  "full",
        "/user/export":     "full",
        "/user/import":     "full",
        "/user/finance":    "full",
        "/user/settings":   "full",

        "/vendor/vendors-approvals":    "none",
        "/vendor/vendor-orders":        "none",
        "/vendor/shipments/execution":  "none",

        "/pricing/upload":     "none",
        "/pricing/api":        "none",
        "/pricing/compare":    "none",
        "/pricing/selection":  "none",
        "/pricing/dashboard":  "none",

        "/rates/compare":           "none",
        "/rates/shipment-details":  "none",
        "/rates/bookings":          "none",

        "/operations/tracking": "none",

        "/notifications": "none",

        "/billing/invoices":      "none",
        "/billing/payments":      "none",
        "/billing/disputes":      "none",
        "/billing/subscription":  "none",

        "/cms/articles":   "none",
        "/cms/knowledge":  "none",

        "/analytics/user-activity":       "none",
        "/analytics/revenue":             "none",
        "/analytics/booking-trends":      "none",
        "/analytics/vendor-performance":  "none",

        "/signin": "none",
        "/signup": "none",
    },

    Role.SALES: {
        "/sales/dashboard": "full",
        "/dashboard":       "none",

        "/vendor/vendors-approvals":    "view",
        "/vendor/vendor-orders":        "view",
        "/vendor/shipments/execution":  "view",

        "/pricing/upload":     "view",
        "/pricing/compare":    "full",
        "/pricing/selection":  "full",
        "/pricing/dashboard":  "full",

        "/rates/compare":           "full",
        "/rates/shipment-details":  "full",
        "/rates/bookings":          "full",
        "/rates/book":              "full",

        "/operations/tracking": "view",

        "/notifications": "full",

        "/billing/invoices":      "view",
        "/billing/payments":      "view",
        "/billing/disputes":      "raise",
        "/billing/subscription":  "none",

        "/cms/articles":   "none",
        "/cms/knowledge":  "full",

        "/analytics/revenue":             "full",
        "/analytics/booking-trends":      "full",
        "/analytics/user-activity":       "none",
        "/analytics/vendor-performance":  "view",

        "/signin": "none",
        "/signup": "none",
    },
}
