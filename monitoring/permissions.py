"""
Role based permission classes.

Tokens carry one of two role claims: ``Admin`` (full read/write) or
``User`` (read-only).
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS

ADMIN = "Admin"
USER = "User"
KNOWN_ROLES = {ADMIN, USER}


def _role(request):
    user = getattr(request, "user", None)
    if not (user and user.is_authenticated):
        return None
    return getattr(user, "role", None)


class IsAdminRole(BasePermission):
    """Allow access only to tokens carrying the Admin role."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return _role(request) == ADMIN


class IsKnownRole(BasePermission):
    """Admin or User."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return _role(request) in KNOWN_ROLES


class IsAdminOrReadOnly(BasePermission):
    """Reads for Admin or User; writes for Admin only."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        if request.method in SAFE_METHODS:
            return IsKnownRole().has_permission(request, view)
        return IsAdminRole().has_permission(request, view)
