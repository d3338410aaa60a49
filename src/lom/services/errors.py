"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime combatant cannot be created."""
