from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidName(ValidationError):
    """Full name has fewer than two words."""


class MissingEnrollmentId(ValidationError):
    """Enrollment number is blank."""


class CheckinDisabled(DomainError):
    """Raised when the professor has closed the check-in gate."""


class DuplicateToday(DomainError):
    """The enrollment id already has a record for the current date."""

    def __init__(self, message: str, *, existing_time: str):
        super().__init__(message)
        self.existing_time = existing_time


class PersistenceError(DomainError):
    """Raised when the storage backend cannot read or write."""


class StorageCorruptedError(PersistenceError):
    """Stored value under ``key`` could not be decoded."""

    def __init__(self, key: str, raw: str):
        super().__init__(f"Unreadable data under key {key!r}")
        self.key = key
        self.raw = raw


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvalidCredentials(AuthenticationError):
    pass
