# apps/core/permissions.py

from rest_framework.permissions import BasePermission


def role_of(user) -> str:
    """
    Effective role string for a request user.
    - anonymous -> ""
    - superuser -> supervisor
    """
    if not user or not getattr(user, "is_authenticated", False):
        return ""
    if getattr(user, "is_superuser", False):
        return "supervisor"
    return str(getattr(user, "role", "") or "").lower()


def is_student_user(user) -> bool:
    return role_of(user) == "student"


class HasRole(BasePermission):
    allowed_roles: tuple[str, ...] = ()
    message = "You do not have permission to access this resource."

    def has_permission(self, request, view):
        return role_of(getattr(request, "user", None)) in self.allowed_roles


class IsSupervisor(HasRole):
    """Catalog administration."""
    allowed_roles = ("supervisor",)


class IsSupervisorOrManager(HasRole):
    """Reports and section listing."""
    allowed_roles = ("supervisor", "manager")


class IsStudent(HasRole):
    """
    Student-only routes
    - login required
    - role must be student (profile linkage is checked by the services)
    """
    allowed_roles = ("student",)
    message = "Student account required."
