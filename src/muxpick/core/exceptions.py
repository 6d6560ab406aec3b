"""
Custom exceptions for Muxpick.

Modified: 2026-10-16
"""


class MuxpickError(Exception):
    """Base exception for all Muxpick errors."""

    pass


class TmuxError(MuxpickError):
    """Raised when tmux is unreachable or rejects an operation."""

    def __init__(self, message: str, command: str = ""):
        super().__init__(message)
        self.command = command


class GitError(MuxpickError):
    """Raised when a git operation fails or a path is not a repository."""

    def __init__(self, message: str, command: str = ""):
        super().__init__(message)
        self.command = command


class EditorError(MuxpickError):
    """Raised when the editor integration cannot open a file or buffer."""

    pass


class DispatchLoopError(MuxpickError):
    """Raised when a dispatch chain produces the same action kind twice."""

    def __init__(self, message: str, chain: tuple = ()):
        super().__init__(message)
        self.chain = chain


class ConfigurationError(MuxpickError):
    """Raised when configuration is invalid or missing."""

    pass
