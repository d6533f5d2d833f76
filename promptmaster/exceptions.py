"""Errors raised outside the pure generation core."""


class PromptMasterError(Exception):
    """Base class for application errors."""


class StorageError(PromptMasterError):
    """A read or write against the prompt store failed."""
