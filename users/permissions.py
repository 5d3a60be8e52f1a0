from rest_framework.permissions import BasePermission

import logging

logger = logging.getLogger("rest_framework")


class HasRole(BasePermission):
    """
    Role gate for authenticated requests.

    Views list the roles they accept in ``allowed_roles``; the comparison is
    case-insensitive. An empty or missing ``allowed_roles`` admits any
    authenticated user. Anonymous requests are refused, which DRF reports as
    401 because the view has an authenticator.
    """

    message = {"code": "forbidden", "message": "You do not have permission to perform this action."}

    def get_allowed_roles(self, view):
        return getattr(view, "allowed_roles", None) or ()

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        allowed = {role.lower() for role in self.get_allowed_roles(view)}
        if not allowed:
            return True

        role = (user.role or "").lower()
        if role not in allowed:
            logger.info("User %s with role %r denied access to %s", user.pk, role, view.__class__.__name__)
            return False
        return True


class IsAdminRole(HasRole):
    def get_allowed_roles(self, view):
        return ("admin",)
