"""
permissions.py — Role checks and the module/action permission matrix.

ADMIN may do everything; STAFF and CUSTOMER are limited to PERMISSION_MATRIX.
An anonymous user (None) may do nothing. Modules use the admin console's
camelCase names ("records", "feeCalculations", ...).
"""

from __future__ import annotations

from notary_shared.constants import PERMISSION_MATRIX, PermissionAction
from notary_shared.models import AuthUser


def has_role(user: AuthUser | None, *roles: str) -> bool:
    return user is not None and user.role in roles


def is_admin(user: AuthUser | None) -> bool:
    return has_role(user, "ADMIN")


def is_staff(user: AuthUser | None) -> bool:
    return has_role(user, "STAFF")


def is_customer(user: AuthUser | None) -> bool:
    return has_role(user, "CUSTOMER")


def is_admin_or_staff(user: AuthUser | None) -> bool:
    return has_role(user, "ADMIN", "STAFF")


def can(user: AuthUser | None, module: str, action: PermissionAction) -> bool:
    if user is None:
        return False
    if user.role == "ADMIN":
        return True
    return action in PERMISSION_MATRIX.get(user.role, {}).get(module, ())


def allowed_actions(user: AuthUser | None, module: str) -> tuple[str, ...]:
    if user is None:
        return ()
    if user.role == "ADMIN":
        return ("create", "read", "update", "delete")
    return PERMISSION_MATRIX.get(user.role, {}).get(module, ())
