"""
Configuration-related exceptions.
"""


class ConfigLoadError(Exception):
    """Exception raised when a local config file is missing or malformed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot load {path}: {reason}")
        self.path = path
        self.reason = reason
