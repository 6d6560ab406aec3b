"""
Neovim integration.

Talks to running Neovim instances through their RPC server sockets using
``nvim --server``. Listing is best effort: an unreachable instance simply
contributes no buffers.

Modified: 2026-10-16
"""

import json
import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from muxpick.core.exceptions import EditorError, TmuxError
from muxpick.core.models import NvimBuffer
from muxpick.core.tmux_client import TmuxClient


logger = logging.getLogger(__name__)

LIST_BUFFERS_EXPR = "json_encode(getbufinfo({'buflisted': 1}))"


def discover_sockets() -> List[Path]:
    """
    Find Neovim server sockets in the default locations.

    Covers ``$XDG_RUNTIME_DIR/nvim.*`` (Linux) and
    ``$TMPDIR/nvim.$USER/*/nvim.*`` (macOS), plus ``$NVIM`` when set.
    """
    candidates: List[Path] = []

    listen = os.environ.get("NVIM")
    if listen:
        candidates.append(Path(listen))

    runtime_dir = os.environ.get("XDG_RUNTIME_DIR")
    if runtime_dir:
        candidates.extend(sorted(Path(runtime_dir).glob("nvim.*")))

    user = os.environ.get("USER", "")
    tmp_root = Path(tempfile.gettempdir()) / f"nvim.{user}"
    if tmp_root.is_dir():
        candidates.extend(sorted(tmp_root.glob("*/nvim.*")))

    sockets = []
    for path in candidates:
        if path in sockets:
            continue
        try:
            if path.is_socket():
                sockets.append(path)
        except OSError:
            continue
    return sockets


class NvimIntegration:
    """Opens files and buffers in Neovim, falling back to a tmux window."""

    def __init__(self, tmux: Optional[TmuxClient] = None, binary: str = "nvim"):
        self.tmux = tmux or TmuxClient()
        self.binary = binary

    def _remote(self, socket: Path, args: Sequence[str]) -> str:
        command = [self.binary, "--server", str(socket), *args]
        try:
            completed = subprocess.run(
                command,
                check=False,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise EditorError(f"{self.binary} not found") from e
        except OSError as e:
            raise EditorError(f"cannot run {self.binary}: {e}") from e

        if completed.returncode != 0:
            raise EditorError(completed.stderr.strip() or f"nvim {args[0]} failed")
        return completed.stdout

    def list_buffers(self) -> List[Tuple[Path, NvimBuffer]]:
        """
        List listed buffers of every reachable instance.

        Returns:
            (socket, buffer) pairs; empty if no instance answers
        """
        result: List[Tuple[Path, NvimBuffer]] = []
        for socket in discover_sockets():
            try:
                output = self._remote(socket, ["--remote-expr", LIST_BUFFERS_EXPR])
                infos = json.loads(output or "[]")
            except (EditorError, ValueError) as e:
                logger.warning(f"Skipping Neovim at {socket}: {e}")
                continue

            for info in infos:
                buffer = NvimBuffer.from_buffer_info(info)
                if buffer.name:
                    result.append((socket, buffer))
        return result

    def open_file(self, path: Path) -> None:
        """
        Open ``path`` in the first reachable instance, or in a new tmux window.

        Raises:
            EditorError: If neither an instance nor tmux can open the file
        """
        for socket in discover_sockets():
            try:
                self._remote(socket, ["--remote", str(path)])
                logger.info(f"Opened {path} in Neovim at {socket}")
                return
            except EditorError as e:
                logger.warning(f"Neovim at {socket} refused {path}: {e}")

        editor = os.environ.get("EDITOR") or self.binary
        try:
            self.tmux.new_window([editor, str(path)], cwd=Path(path).parent)
        except TmuxError as e:
            raise EditorError(f"Could not open {path}: {e}") from e
        logger.info(f"Opened {path} with {editor} in a new tmux window")

    def open_buffer(self, socket: Path, bufnr: int) -> None:
        """Make ``bufnr`` the current buffer of the instance at ``socket``."""
        self._remote(socket, ["--remote-send", f"<C-\\><C-N>:buffer {bufnr}<CR>"])
        logger.info(f"Switched Neovim at {socket} to buffer {bufnr}")
