"""Domain error codes for the club module."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Broad failure category; the API maps each kind to a status code."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ID = "INVALID_ID"
    INVALID_INPUT = "INVALID_INPUT"
    EVENT_TYPE_NOT_FOUND = "EVENT_TYPE_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    PREFERENCE_NOT_FOUND = "PREFERENCE_NOT_FOUND"
    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    EVENT_TYPE_NAME_TAKEN = "EVENT_TYPE_NAME_TAKEN"
    EVENT_TYPE_IN_USE = "EVENT_TYPE_IN_USE"
    EVENT_HAS_REGISTRATIONS = "EVENT_HAS_REGISTRATIONS"
    EVENT_TYPE_CHANGE_BLOCKED = "EVENT_TYPE_CHANGE_BLOCKED"
    PREFERENCE_MISMATCH = "PREFERENCE_MISMATCH"
    PREFERENCE_IN_USE = "PREFERENCE_IN_USE"
    ALREADY_PREFERRED = "ALREADY_PREFERRED"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    STORE_FAILURE = "STORE_FAILURE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Input is missing or malformed."""

    kind = ErrorKind.VALIDATION


class NotFoundError(DomainError):
    """A referenced row does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(DomainError):
    """The operation would violate a club invariant."""

    kind = ErrorKind.CONFLICT


class InternalError(DomainError):
    """The store failed; details are logged, never returned."""

    kind = ErrorKind.INTERNAL


class InvalidIdError(ValidationError):
    """Raised when a path or body identifier is not a positive integer."""

    def __init__(self, resource: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message=f"Invalid {resource} ID",
        )


class InvalidInputError(ValidationError):
    """Raised when a field is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class EventTypeNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_TYPE_NOT_FOUND,
            message="Event type not found",
        )


class EventNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EVENT_NOT_FOUND, message="Event not found")


class MemberNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(code=ErrorCode.MEMBER_NOT_FOUND, message="Member not found")


class PreferenceNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PREFERENCE_NOT_FOUND,
            message="Preference not found",
        )


class RegistrationNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_NOT_FOUND,
            message="Registration not found",
        )


class EventTypeNameTakenError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_TYPE_NAME_TAKEN,
            message="An event type with this name already exists",
        )


class EventTypeInUseError(ConflictError):
    """Raised when an event type still has dependent events or preferences."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.EVENT_TYPE_IN_USE, message=message)


class EventHasRegistrationsError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_HAS_REGISTRATIONS,
            message="Cannot delete event that has registered members",
        )


class EventTypeChangeBlockedError(ConflictError):
    """Raised when retyping an event would orphan existing registrations."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_TYPE_CHANGE_BLOCKED,
            message="Registered members do not prefer the new event type",
        )


class PreferenceMismatchError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PREFERENCE_MISMATCH,
            message="Member does not prefer this event type",
        )


class PreferenceInUseError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PREFERENCE_IN_USE,
            message="Member is registered for events of this type",
        )


class AlreadyPreferredError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_PREFERRED,
            message="Member already prefers this event type",
        )


class AlreadyRegisteredError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_REGISTERED,
            message="Member is already registered for this event",
        )


class StoreFailureError(InternalError):
    """Raised by the store when the database driver fails."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_FAILURE,
            message="Database query failed",
        )
