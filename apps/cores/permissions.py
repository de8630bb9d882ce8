from rest_framework.permissions import BasePermission


class HasRole(BasePermission):
    role = None
    message = "Access denied."

    def has_permission(self, request, view):
        return (
            request.user.is_authenticated
            and request.user.role == self.role
        )


class IsClient(HasRole):
    role = "Client"
    message = "Only clients can perform this action."


class IsFreelancer(HasRole):
    role = "Freelancer"
    message = "Only freelancers can perform this action."


class IsAdminRole(HasRole):
    role = "Admin"
    message = "Access denied. Admin privileges required."
