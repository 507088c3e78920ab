from __future__ import annotations

import json
import os
import tempfile
import unittest

from navaccess.config.access_policy import ACCESS_TABLE, ROLE_HOME
from navaccess.errors import ConfigurationError
from navaccess.models.role import Role, AccessLevel
from navaccess.services.access_policy import (
    AccessPolicy,
    coerce_role,
    load_access_table,
    normalize_path,
)
from navaccess.services.menu_filter import get_menu_definition
from navaccess.schemas.navigation import MenuGroup


def _menu_paths():
    paths = set()
    for nodes in get_menu_definition().values():
        for node in nodes:
            if isinstance(node, MenuGroup):
                paths.update(child.path for child in node.children)
            else:
                paths.add(node.path)
    return paths


class NormalizePathTestCase(unittest.TestCase):
    def test_dashboard_subroutes_collapse(self):
        self.assertEqual(normalize_path("/dashboard"), "/dashboard")
        self.assertEqual(normalize_path("/dashboard/reports/weekly"), "/dashboard")

    def test_other_paths_untouched(self):
        self.assertEqual(normalize_path("/ops/dashboard"), "/ops/dashboard")
        self.assertEqual(normalize_path("/billing/invoices"), "/billing/invoices")
        self.assertEqual(normalize_path("/"), "/")


class CoerceRoleTestCase(unittest.TestCase):
    def test_accepts_values_names_and_members(self):
        self.assertIs(coerce_role("SALES_TEAM"), Role.SALES)
        self.assertIs(coerce_role("SALES"), Role.SALES)
        self.assertIs(coerce_role(Role.CUSTOMER), Role.CUSTOMER)

    def test_unknown_values_are_none(self):
        self.assertIsNone(coerce_role("GUEST"))
        self.assertIsNone(coerce_role(""))
        self.assertIsNone(coerce_role(None))
        self.assertIsNone(coerce_role(42))


class AccessPolicyLookupTestCase(unittest.TestCase):
    def setUp(self):
        self.policy = AccessPolicy()

    def test_ops_team_cannot_see_invoices(self):
        self.assertEqual(self.policy.lookup(Role.OPS_TEAM, "/billing/invoices"), AccessLevel.NONE)

    def test_super_admin_has_full_invoices_without_badge(self):
        level = self.policy.lookup(Role.SUPER_ADMIN, "/billing/invoices")
        self.assertEqual(level, AccessLevel.FULL)
        self.assertIsNone(self.policy.badge(level))

    def test_pricing_manager_views_rate_comparison(self):
        level = self.policy.lookup(Role.PRICING_MANAGER, "/rates/compare")
        self.assertEqual(level, AccessLevel.VIEW)
        self.assertEqual(self.policy.badge(level), "view")

    def test_badges(self):
        self.assertEqual(self.policy.badge(AccessLevel.RATE), "rate-related")
        self.assertEqual(self.policy.badge(AccessLevel.RAISE), "raise only")
        self.assertEqual(self.policy.badge(AccessLevel.ADMIN), "admin")
        self.assertIsNone(self.policy.badge(AccessLevel.NONE))

    def test_missing_paths_are_denied(self):
        for role in Role:
            listed = ACCESS_TABLE[role]
            for path in ("/nowhere", "/admin/users", "/rates/book", "/operations/exceptions"):
                if path in listed:
                    continue
                self.assertEqual(self.policy.lookup(role, path), AccessLevel.NONE, (role, path))

    def test_unknown_role_is_denied_everywhere(self):
        for path in ("/", "/dashboard", "/billing/invoices", "/signin"):
            self.assertEqual(self.policy.lookup("GUEST", path), AccessLevel.NONE)
            self.assertEqual(self.policy.lookup(None, path), AccessLevel.NONE)

    def test_non_string_path_is_denied(self):
        self.assertEqual(self.policy.lookup(Role.SUPER_ADMIN, None), AccessLevel.NONE)

    def test_sentinel_matches_home_path(self):
        for role in Role:
            self.assertEqual(
                self.policy.lookup(role, "/"),
                self.policy.lookup(role, self.policy.home_path(role)),
            )

    def test_every_home_path_is_reachable(self):
        for role in Role:
            self.assertEqual(self.policy.lookup(role, "/"), AccessLevel.FULL, role)

    def test_dashboard_subroutes_share_dashboard_rule(self):
        self.assertEqual(self.policy.lookup(Role.SUPER_ADMIN, "/dashboard/overview"), AccessLevel.FULL)
        self.assertEqual(self.policy.lookup(Role.OPS_TEAM, "/dashboard/overview"), AccessLevel.NONE)

    def test_resolve_path(self):
        self.assertEqual(self.policy.resolve_path(Role.OPS_TEAM, "/"), "/ops/dashboard")
        self.assertEqual(self.policy.resolve_path(Role.SUPER_ADMIN, "/dashboard/x"), "/dashboard")
        self.assertEqual(self.policy.resolve_path("GUEST", "/"), "/")
        self.assertIsNone(self.policy.resolve_path(Role.SALES, None))

    def test_lookup_is_deterministic(self):
        first = [self.policy.lookup(role, path) for role in Role for path in ACCESS_TABLE[role]]
        second = [AccessPolicy().lookup(role, path) for role in Role for path in ACCESS_TABLE[role]]
        self.assertEqual(first, second)

    def test_matrix_is_plain_data(self):
        matrix = self.policy.matrix()
        self.assertEqual(matrix["SALES_TEAM"]["/billing/disputes"], "raise")
        self.assertEqual(matrix["SUPER_ADMIN"]["/cms/articles"], "admin")


class AccessTableConsistencyTestCase(unittest.TestCase):
    def test_every_role_has_a_table_and_home(self):
        self.assertEqual(set(ACCESS_TABLE), set(Role))
        self.assertEqual(set(ROLE_HOME), set(Role))

    def test_table_paths_are_known_routes(self):
        known = _menu_paths() | set(ROLE_HOME.values())
        for role, paths in ACCESS_TABLE.items():
            for path in paths:
                if path.startswith("/admin/"):
                    continue
                self.assertIn(path, known, f"{role.value} lists unknown route {path}")

    def test_table_levels_are_valid(self):
        for paths in ACCESS_TABLE.values():
            for level in paths.values():
                AccessLevel(level)


class AccessPolicyConfigurationTestCase(unittest.TestCase):
    def test_invalid_level_fails_fast(self):
        with self.assertRaises(ConfigurationError):
            AccessPolicy(table={Role.SALES: {"/rates/compare": "everything"}})

    def test_missing_home_fails_fast(self):
        homes = dict(ROLE_HOME)
        del homes[Role.SALES]
        with self.assertRaises(ConfigurationError):
            AccessPolicy(homes=homes)

    def test_home_for_unknown_role_fails_fast(self):
        homes = dict(ROLE_HOME)
        homes["GUEST"] = "/guest"
        with self.assertRaises(ConfigurationError):
            AccessPolicy(homes=homes)

    def test_badge_for_unknown_level_fails_fast(self):
        with self.assertRaises(ConfigurationError):
            AccessPolicy(badges={"view": "view", "superuser": "su"})

    def test_custom_badges(self):
        policy = AccessPolicy(badges={"view": "read only"})
        self.assertEqual(policy.badge(AccessLevel.VIEW), "read only")
        self.assertIsNone(policy.badge(AccessLevel.RATE))

    def test_custom_table(self):
        policy = AccessPolicy(table={"SALES_TEAM": {"/sales/dashboard": "full"}})
        self.assertEqual(policy.lookup(Role.SALES, "/"), AccessLevel.FULL)
        self.assertEqual(policy.lookup(Role.SUPER_ADMIN, "/"), AccessLevel.NONE)


class LoadAccessTableTestCase(unittest.TestCase):
    def _write(self, content: str) -> str:
        fd, path = tempfile.mkstemp(suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
        self.addCleanup(os.remove, path)
        return path

    def test_loads_valid_file(self):
        path = self._write(json.dumps({"OPS_TEAM": {"/ops/dashboard": "full", "/notifications": "view"}}))
        table = load_access_table(path)
        self.assertEqual(table[Role.OPS_TEAM]["/notifications"], AccessLevel.VIEW)

    def test_rejects_unknown_role(self):
        path = self._write(json.dumps({"GUEST": {"/": "full"}}))
        with self.assertRaises(ConfigurationError):
            load_access_table(path)

    def test_rejects_broken_json(self):
        path = self._write("{not json")
        with self.assertRaises(ConfigurationError):
            load_access_table(path)

    def test_rejects_missing_file(self):
        with self.assertRaises(ConfigurationError):
            load_access_table("/nonexistent/policy.json")
