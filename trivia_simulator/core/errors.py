class GameStateError(RuntimeError):
    """Raised when an operation needs players (or a playable game) that don't exist yet."""
