# group_portal/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Entity Not Found Errors ---

class GroupNotFoundError(DomainError):
    """Raised when no group content exists for the requested identifier."""
    def __init__(self, group_id: int, entity_type_id: str = "node"):
        super().__init__(f"Group '{entity_type_id}:{group_id}' was not found.")

class NotAGroupError(DomainError):
    """Raised when the content exists but does not carry the group marker."""
    def __init__(self, group_id: int):
        super().__init__(f"Content '{group_id}' is not a group.")

class MembershipNotFoundError(DomainError):
    """Raised when leaving a group the viewer is not a member of."""
    def __init__(self, group_id: int, viewer_id: int):
        super().__init__(f"Viewer '{viewer_id}' has no membership in group '{group_id}'.")

# --- Permission Errors ---

class AccessDeniedError(DomainError):
    """Raised when the viewer is not allowed to perform a group operation."""
    def __init__(self, operation: str, group_id: int):
        super().__init__(f"Access denied: cannot '{operation}' group '{group_id}'.")

# --- State / Validation Errors ---

class AlreadyMemberError(DomainError):
    """Raised when subscribing to a group the viewer is already an active member of."""
    def __init__(self, group_id: int):
        super().__init__(f"You are already a member of group '{group_id}'.")

class GroupManagerCannotLeaveError(DomainError):
    """Raised when the group owner attempts to unsubscribe."""
    def __init__(self, group_id: int):
        super().__init__(f"As the manager of group '{group_id}' you can not leave the group.")

class InvalidMembershipTypeError(DomainError):
    """Raised when the requested membership type token is not configured."""
    def __init__(self, membership_type: str):
        super().__init__(f"Membership type '{membership_type}' is not supported.")

class MembershipConflictError(DomainError):
    """Raised by stores when a second membership for the same (group, viewer) pair is saved."""
    def __init__(self, group_id: int, viewer_id: int):
        super().__init__(f"Viewer '{viewer_id}' already has a membership in group '{group_id}'.")
