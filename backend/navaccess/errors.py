"""
Navigation engine errors.

A policy miss is not an error: lookups resolve it to ``AccessLevel.NONE``.
"""


class ConfigurationError(ValueError):
    """Static menu or policy configuration is malformed"""


class CollaboratorUnavailable(RuntimeError):
    """RoleStore or Router could not supply a value"""

    def __init__(self, collaborator: str, reason: str = ""):
        self.collaborator = collaborator
        self.reason = reason
        message = f"{collaborator} unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
