"""
Errors raised by the volbright core
"""


class ArgumentError(ValueError):
    """Unrecognized mode or action on the command line."""


class LockTimeoutError(RuntimeError):
    """Another invocation holds the instance lock."""
