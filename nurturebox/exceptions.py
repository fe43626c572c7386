"""
Application-level exception hierarchy.

Routers turn these into HTTP errors; the view state objects turn them into
user notifications. Nothing here is fatal to the process.
"""


class NurtureBoxError(Exception):
    """Base exception for all application errors."""


class ValidationFailure(NurtureBoxError):
    """
    A required field was blank.

    Raised before any store call is made, so no state has been touched.
    The message is user-facing.
    """


class StoreError(NurtureBoxError):
    """
    A call to the character store failed (network, server or SDK error).

    ``str(exc)`` is the generic user-facing message; the underlying SDK
    error is kept on ``__cause__`` and in the logs.
    """


class CharacterNotFound(StoreError):
    """Update or delete targeted an identifier the store does not have."""

    def __init__(self, character_id: str):
        super().__init__(f"Character {character_id} not found")
        self.character_id = character_id
