"""Service-layer exceptions."""


class BattleStalemateError(Exception):
    """Raised when neither side of a battle can deal damage, so it could never end."""


class SessionEndedError(Exception):
    """Raised when input is submitted to a session that already reached an ending."""
