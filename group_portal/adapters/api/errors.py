# group_portal\adapters\api\errors.py
from fastapi import HTTPException, status

from group_portal.core.domain.exceptions import (
    AccessDeniedError,
    AlreadyMemberError,
    DomainError,
    GroupManagerCannotLeaveError,
    GroupNotFoundError,
    InvalidMembershipTypeError,
    MembershipConflictError,
    MembershipNotFoundError,
    NotAGroupError,
)

# Most specific first; DomainError itself falls through to 400.
_STATUS_BY_ERROR = (
    ((GroupNotFoundError, NotAGroupError, MembershipNotFoundError), status.HTTP_404_NOT_FOUND),
    ((AccessDeniedError,), status.HTTP_403_FORBIDDEN),
    ((AlreadyMemberError, GroupManagerCannotLeaveError, MembershipConflictError), status.HTTP_409_CONFLICT),
    ((InvalidMembershipTypeError,), status.HTTP_422_UNPROCESSABLE_ENTITY),
)


def http_error_for(error: DomainError) -> HTTPException:
    """Maps a domain error to the HTTP error the routers raise."""
    for error_types, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_types):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)
