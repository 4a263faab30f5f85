from __future__ import annotations

# Default permission catalogue inserted by `flask seed-permissions`.
# `key` is the short machine code checked by clients; `name` is the label.
DEFAULT_PERMISSIONS: list[dict[str, str]] = [
    {"key": "vwprj", "name": "view_projects", "description": "Can view projects"},
    {"key": "crtpr", "name": "create_projects", "description": "Can create projects"},
    {"key": "updpr", "name": "update_projects", "description": "Can update projects"},
    {"key": "dltpr", "name": "delete_projects", "description": "Can delete projects"},
    {"key": "vwttp", "name": "view_test_plans", "description": "Can view test plans"},
    {"key": "crtpt", "name": "create_test_plans", "description": "Can create test plans"},
    {"key": "updpt", "name": "update_test_plans", "description": "Can update test plans"},
    {"key": "dltpt", "name": "delete_test_plans", "description": "Can delete test plans"},
]

DEFAULT_PERMISSION_KEYS: set[str] = {p["key"] for p in DEFAULT_PERMISSIONS}
