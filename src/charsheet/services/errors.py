"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when a roster document cannot be turned into snapshots."""


class RosterStateError(Exception):
    """Raised when a roster operation is called outside its contract."""


class EmptyRosterError(RosterStateError):
    """Raised when an operation needs at least one character."""
