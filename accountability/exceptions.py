"""Exceptions raised by the persistence layer."""


class AccountabilityError(Exception):
    """Base class for errors raised by this package."""


class StorageUnavailableError(AccountabilityError):
    """The storage handle could not be opened.

    Only the no-op handle raises this, from its session factory. Repositories
    check availability first and return an empty result instead.
    """


class BackupFormatError(AccountabilityError, ValueError):
    """A backup document failed validation before anything was restored."""
