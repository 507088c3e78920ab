"""
Sidebar menu definition.

Each list is an ordered sequence of leaves ({"name", "path", "icon"}) and
groups ({"name", "icon", "children": [leaf, ...]}). Icons are opaque keys
resolved by the rendering layer. Visibility is decided entirely by the
access policy; nothing here is role-specific.
"""

MAIN_MENU = [
    {"name": "Dashboard",       "path": "/user/dashboard",  "icon": "box-cube"},
    {"name": "Sales Dashboard", "path": "/sales/dashboard", "icon": "box-cube"},
    {"name": "Ops Dashboard",   "path": "/ops/dashboard",   "icon": "box-cube"},
    {"name": "Quote & Book",    "path": "/quoterate/book",  "icon": "grid"},
    {"name": "Export",          "path": "/user/export",     "icon": "export"},
    {"name": "Import",          "path": "/user/import",     "icon": "import"},
    {"name": "Finance",         "path": "/user/finance",    "icon": "file"},
    {"name": "Settings",        "path": "/user/settings",   "icon": "file"},

    {
        "name": "Vendors",
        "icon": "box-cube",
        "children": [
            {"name": "Register & Approve",        "path": "/vendor/vendors-approvals"},
            {"name": "Manage Vendor Orders",      "path": "/vendor/vendor-orders"},
            {"name": "Handle Shipment Execution", "path": "/vendor/shipments/execution"},
        ],
    },
    {
        "name": "Pricing Manager",
        "icon": "docs",
        "children": [
            {"name": "Price Uploading",     "path": "/pricing/upload"},
            {"name": "API Price Fetching",  "path": "/pricing/api"},
            {"name": "Price Comparison",    "path": "/pricing/compare"},
            {"name": "Price Selection",     "path": "/pricing/selection"},
            {"name": "Dashboard & Reports", "path": "/pricing/dashboard"},
        ],
    },
    {
        "name": "Freight Rates & Quotes",
        "icon": "bolt",
        "children": [
            {"name": "Compare Freight Rates",             "path": "/rates/compare"},
            {"name": "Enter Shipment Details for Quotes", "path": "/rates/shipment-details"},
            {"name": "Manage Bookings",                   "path": "/rates/bookings"},
            {"name": "Book FCL & LCL Shipments",          "path": "/rates/book"},
        ],
    },
    {
        "name": "Bookings & Operations",
        "icon": "time",
        "children": [
            {"name": "Shipment Tracking & Milestones", "path": "/operations/tracking"},
            {"name": "Shipment Exceptions",            "path": "/operations/exceptions"},
        ],
    },
    {
        "name": "Notifications",
        "icon": "plug-in",
        "children": [
            {"name": "All Alerts & Actions", "path": "/notifications"},
        ],
    },
    {
        "name": "Billing & Payments",
        "icon": "page",
        "children": [
            {"name": "Manage Invoices",          "path": "/billing/invoices"},
            {"name": "Track Payments",           "path": "/billing/payments"},
            {"name": "Handle Disputes",          "path": "/billing/disputes"},
            {"name": "View Subscription Status", "path": "/billing/subscription"},
        ],
    },
    {
        "name": "CMS Management",
        "icon": "pie-chart",
        "children": [
            {"name": "Manage Articles",        "path": "/cms/articles"},
            {"name": "View Articles & Guides", "path": "/cms/knowledge"},
        ],
    },
    {
        "name": "Analytics & Reports",
        "icon": "pie-chart",
        "children": [
            {"name": "User & Activity Reports", "path": "/analytics/user-activity"},
            {"name": "Revenue Reports",         "path": "/analytics/revenue"},
            {"name": "Booking Trends",          "path": "/analytics/booking-trends"},
            {"name": "Vendor Performance",      "path": "/analytics/vendor-performance"},
        ],
    },
]

OTHERS_MENU = [
    {
        "name": "Authentication",
        "icon": "plug-in",
        "children": [
            {"name": "Sign In", "path": "/signin"},
            {"name": "Sign Up", "path": "/signup"},
        ],
    },
]

MENU_DEFINITION = {
    "main": MAIN_MENU,
    "others": OTHERS_MENU,
}
