"""
Role-based access rules.

The identity provider authenticates the caller upstream; by the time a
request reaches a view it carries a user whose Django groups are the role
set. Only two roles exist: USER and ADMIN. Superusers always act as ADMIN.
"""

from rest_framework.permissions import SAFE_METHODS, BasePermission

ROLE_USER = "USER"
ROLE_ADMIN = "ADMIN"


def roles_of(user):
    if user is None or not user.is_authenticated:
        return set()
    roles = {name.upper() for name in user.groups.values_list("name", flat=True)}
    if user.is_superuser:
        roles.add(ROLE_ADMIN)
    return roles


class RolePermission(BasePermission):
    """Grants access when the caller holds one of the roles mapped to the method."""

    read_roles = (ROLE_USER, ROLE_ADMIN)
    write_roles = (ROLE_ADMIN,)
    method_roles = {}

    def allowed_roles(self, method):
        if method in self.method_roles:
            return self.method_roles[method]
        if method in SAFE_METHODS:
            return self.read_roles
        return self.write_roles

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        return bool(roles_of(request.user) & set(self.allowed_roles(request.method)))


class CatalogPermission(RolePermission):
    """Products and customers: everyone reads, only ADMIN writes."""


class OrderPermission(RolePermission):
    """Orders: USER may also place orders; status changes and deletes are ADMIN only."""

    method_roles = {
        "POST": (ROLE_USER, ROLE_ADMIN),
    }
