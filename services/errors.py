"""
Service Errors

Raised at the save/update boundary when user input cannot be stored.
The cost engine itself never raises.
"""


class ValidationError(Exception):
    """Raised when a catalog, settings or import payload fails validation."""
    pass
