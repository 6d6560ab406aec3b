"""
Tests for the Neovim integration.

Created: 2026-10-16
"""

import json
import socket as socket_module
from pathlib import Path
from unittest.mock import patch

import pytest

from muxpick.core.exceptions import EditorError, TmuxError
from muxpick.core.nvim import NvimIntegration, discover_sockets

from tests.utils import FakeTmux, completed


SOCKET = Path("/run/user/1000/nvim.1234.0")


@pytest.fixture
def mock_run():
    with patch("muxpick.core.nvim.subprocess.run") as run:
        run.return_value = completed()
        yield run


@pytest.fixture
def one_socket():
    with patch("muxpick.core.nvim.discover_sockets", return_value=[SOCKET]):
        yield SOCKET


@pytest.fixture
def no_sockets():
    with patch("muxpick.core.nvim.discover_sockets", return_value=[]):
        yield


class TestDiscoverSockets:
    """Test socket discovery."""

    def test_finds_runtime_dir_sockets(self, monkeypatch, tmp_path):
        path = tmp_path / "nvim.99.0"
        server = socket_module.socket(socket_module.AF_UNIX, socket_module.SOCK_STREAM)
        try:
            server.bind(str(path))
            (tmp_path / "nvim.not-a-socket").write_text("")
            monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path))
            monkeypatch.delenv("NVIM", raising=False)
            monkeypatch.setenv("USER", "nobody-muxpick-test")

            assert discover_sockets() == [path]
        finally:
            server.close()

    def test_nothing_running(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path))
        monkeypatch.setenv("NVIM", str(tmp_path / "gone"))
        monkeypatch.setenv("USER", "nobody-muxpick-test")

        assert discover_sockets() == []


class TestListBuffers:
    """Test buffer listing."""

    def test_lists_named_buffers(self, mock_run, one_socket):
        mock_run.return_value = completed(
            json.dumps(
                [
                    {"bufnr": 1, "name": "/work/a.py", "changed": 0},
                    {"bufnr": 2, "name": "", "changed": 0},
                    {"bufnr": 3, "name": "/work/b.py", "changed": 1},
                ]
            )
        )

        result = NvimIntegration(FakeTmux()).list_buffers()

        assert [(s, b.bufnr) for s, b in result] == [(SOCKET, 1), (SOCKET, 3)]
        assert result[1][1].modified is True
        assert mock_run.call_args[0][0][:4] == ["nvim", "--server", str(SOCKET), "--remote-expr"]

    def test_unreachable_instance_is_skipped(self, mock_run, one_socket):
        mock_run.return_value = completed(stderr="connection refused", returncode=1)

        assert NvimIntegration(FakeTmux()).list_buffers() == []

    def test_garbage_output_is_skipped(self, mock_run, one_socket):
        mock_run.return_value = completed("not json")

        assert NvimIntegration(FakeTmux()).list_buffers() == []


class TestOpen:
    """Test opening files and buffers."""

    def test_open_file_in_running_instance(self, mock_run, one_socket):
        tmux = FakeTmux()

        NvimIntegration(tmux).open_file(Path("/work/a.py"))

        assert mock_run.call_args[0][0] == [
            "nvim", "--server", str(SOCKET), "--remote", "/work/a.py"
        ]
        assert tmux.calls == []

    def test_open_file_falls_back_to_tmux_window(self, mock_run, no_sockets, monkeypatch):
        monkeypatch.setenv("EDITOR", "vim")
        tmux = FakeTmux()

        NvimIntegration(tmux).open_file(Path("/work/a.py"))

        assert tmux.calls == [("new_window", ["vim", "/work/a.py"], Path("/work"))]
        mock_run.assert_not_called()

    def test_open_file_fallback_failure(self, no_sockets, monkeypatch):
        monkeypatch.delenv("EDITOR", raising=False)
        tmux = FakeTmux()
        tmux.fail_on["new_window"] = TmuxError("no current client")

        with pytest.raises(EditorError):
            NvimIntegration(tmux).open_file(Path("/work/a.py"))

        assert tmux.calls[0][1] == ["nvim", "/work/a.py"]

    def test_open_buffer(self, mock_run):
        NvimIntegration(FakeTmux()).open_buffer(SOCKET, 7)

        assert mock_run.call_args[0][0] == [
            "nvim", "--server", str(SOCKET), "--remote-send", "<C-\\><C-N>:buffer 7<CR>"
        ]

    def test_open_buffer_failure(self, mock_run):
        mock_run.return_value = completed(stderr="connection refused", returncode=1)

        with pytest.raises(EditorError, match="connection refused"):
            NvimIntegration(FakeTmux()).open_buffer(SOCKET, 7)

    def test_open_buffer_unrunnable_binary(self, mock_run):
        mock_run.side_effect = PermissionError(13, "Permission denied")

        with pytest.raises(EditorError, match="cannot run nvim"):
            NvimIntegration(FakeTmux()).open_buffer(SOCKET, 7)
