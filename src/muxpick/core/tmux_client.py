"""
tmux client.

Thin wrapper over the ``tmux`` command line. Every call is a short, blocking
subprocess; failures surface as TmuxError.

Modified: 2026-10-16
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from muxpick.core.exceptions import TmuxError
from muxpick.core.models import TmuxSession


logger = logging.getLogger(__name__)


class TmuxClient:
    """
    Client for the tmux session manager.

    Switching uses ``switch-client`` when running inside tmux and
    ``attach-session`` otherwise.
    """

    def __init__(self, binary: str = "tmux"):
        """
        Initialize tmux client.

        Args:
            binary: tmux executable name or path
        """
        self.binary = binary

    @staticmethod
    def inside_tmux() -> bool:
        return bool(os.environ.get("TMUX"))

    def _run(self, args: Sequence[str], capture: bool = True) -> str:
        """
        Run a tmux command and return its stdout.

        Raises:
            TmuxError: If tmux cannot be run or exits non-zero
        """
        command = [self.binary, *args]
        logger.debug(f"Running {' '.join(command)}")

        try:
            completed = subprocess.run(
                command,
                check=False,
                capture_output=capture,
                text=True,
            )
        except FileNotFoundError as e:
            raise TmuxError(f"{self.binary} not found", command=args[0]) from e
        except OSError as e:
            raise TmuxError(f"cannot run {self.binary}: {e}", command=args[0]) from e

        if completed.returncode != 0:
            err = ""
            if capture:
                err = completed.stderr.strip() or completed.stdout.strip()
            raise TmuxError(err or f"tmux {args[0]} failed", command=args[0])

        return completed.stdout if capture else ""

    def current_path(self) -> Path:
        """Working directory of the active pane."""
        output = self._run(["display-message", "-p", "#{pane_current_path}"]).strip()
        if not output:
            raise TmuxError("tmux reported no current path", command="display-message")
        return Path(output)

    def current_session(self) -> str:
        """Name of the session the client is attached to."""
        output = self._run(["display-message", "-p", "#{session_name}"]).strip()
        if not output:
            raise TmuxError("tmux reported no current session", command="display-message")
        return output

    def list_sessions(self) -> List[TmuxSession]:
        """
        List sessions in tmux's order.

        Returns:
            List of TmuxSession objects (empty when no server is running)
        """
        try:
            output = self._run(["list-sessions", "-F", TmuxSession.FORMAT])
        except TmuxError as e:
            # No server yet means no sessions, not an error
            if "no server running" in str(e) or "error connecting" in str(e):
                return []
            raise

        return [
            TmuxSession.from_tmux_line(line)
            for line in output.splitlines()
            if line.strip()
        ]

    def has_session(self, name: str) -> bool:
        return any(session.name == name for session in self.list_sessions())

    def switch_session(self, name: str) -> None:
        """Switch the current client to ``name`` (or attach when outside tmux)."""
        if self.inside_tmux():
            self._run(["switch-client", "-t", f"={name}"])
        else:
            # attach takes over the terminal until the user detaches
            self._run(["attach-session", "-t", f"={name}"], capture=False)
        logger.info(f"Switched to session {name}")

    def create_session(self, name: str, path: Optional[Path] = None) -> None:
        """
        Create a detached session.

        Args:
            name: Session name
            path: Optional start directory

        Raises:
            TmuxError: If the name is taken or tmux rejects it
        """
        args = ["new-session", "-d", "-s", name]
        if path is not None:
            args += ["-c", str(path)]
        self._run(args)
        logger.info(f"Created session {name}")

    def kill_session(self, name: str) -> None:
        self._run(["kill-session", "-t", f"={name}"])
        logger.info(f"Killed session {name}")

    def new_window(self, command: Sequence[str], cwd: Optional[Path] = None) -> None:
        """Open a new window in the current session running ``command``."""
        args = ["new-window"]
        if cwd is not None:
            args += ["-c", str(cwd)]
        self._run([*args, *command])

    def popup_command(
        self,
        command: str,
        width: str,
        height: str,
        cwd: Optional[Path] = None,
    ) -> None:
        """
        Run ``command`` in a transient popup and wait for it to close.

        Args:
            command: Shell command line
            width: Popup width (e.g. "90%")
            height: Popup height (e.g. "90%")
            cwd: Optional working directory for the command
        """
        args = ["display-popup", "-E", "-w", width, "-h", height]
        if cwd is not None:
            args += ["-d", str(cwd)]
        self._run([*args, command], capture=False)
