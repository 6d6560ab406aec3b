"""
Pilot tests for the Textual application.

Created: 2026-10-16
"""

import pytest

from muxpick.core.exceptions import TmuxError
from muxpick.tui.app import MuxpickApp
from muxpick.tui.controller import View
from muxpick.tui.surface import TextualSurface
from muxpick.tui.ui.dialogs import InputDialog
from muxpick.tui.ui.help_bar import HelpBar
from muxpick.tui.ui.modals import DialogScreen


@pytest.mark.asyncio
async def test_arrow_keys_move_cursor(make_controller):
    """Down arrow moves the session cursor; plain j is filter text."""
    controller = make_controller()
    app = MuxpickApp(controller)

    async with app.run_test() as pilot:
        await pilot.press("down")
        await pilot.pause()
        assert controller.session_picker.fuzzy_list.cursor == 1

        await pilot.press("ctrl+k")
        await pilot.pause()
        assert controller.session_picker.fuzzy_list.cursor == 0

        await pilot.press("o")
        await pilot.pause()
        assert controller.session_picker.fuzzy_list.query == "o"


@pytest.mark.asyncio
async def test_help_bar_shows_hints(make_controller):
    controller = make_controller()
    app = MuxpickApp(controller)

    async with app.run_test() as pilot:
        await pilot.pause()
        help_bar = app.query_one(HelpBar)

        assert help_bar.hints == controller.help_text()
        assert help_bar.context.startswith("sessions")


@pytest.mark.asyncio
async def test_new_session_dialog_flow(make_controller, fake_tmux):
    """n opens the input dialog; typing a name and Enter switches and exits."""
    controller = make_controller()
    app = MuxpickApp(controller)

    async with app.run_test() as pilot:
        await pilot.press("n")
        await pilot.pause()
        assert isinstance(app.screen, DialogScreen)
        assert isinstance(controller.dialog, InputDialog)

        await pilot.press("q", "a", "enter")

    assert ("create_session", "qa", None) in fake_tmux.calls
    assert fake_tmux.calls[-1] == ("switch_session", "qa")
    assert controller.running is False
    assert app.return_code == 0


@pytest.mark.asyncio
async def test_escape_closes_dialog_screen(make_controller):
    controller = make_controller()
    app = MuxpickApp(controller)

    async with app.run_test() as pilot:
        await pilot.press("n")
        await pilot.pause()
        await pilot.press("escape")
        await pilot.pause()

        assert controller.dialog is None
        assert not isinstance(app.screen, DialogScreen)
        assert controller.running is True


@pytest.mark.asyncio
async def test_q_quits(make_controller, fake_tmux):
    controller = make_controller()
    app = MuxpickApp(controller)

    async with app.run_test() as pilot:
        await pilot.press("q")

    assert controller.running is False
    assert "switch_session" not in fake_tmux.call_names()
    assert app.failure is None


@pytest.mark.asyncio
async def test_failure_exits_with_error(make_controller, fake_tmux, fake_surface):
    controller = make_controller()
    fake_tmux.fail_on["switch_session"] = TmuxError("can't find session: main")
    app = MuxpickApp(controller)

    async with app.run_test() as pilot:
        await pilot.press("enter")

    assert isinstance(app.failure, TmuxError)
    assert app.return_code == 1
    assert fake_surface.events[-1] == "enter"


@pytest.mark.asyncio
async def test_palette_view_switch(make_controller):
    controller = make_controller(initial_view=View.COMMAND_PALETTE)
    app = MuxpickApp(controller)

    async with app.run_test() as pilot:
        await pilot.press("f", "i", "l", "e", "enter")
        await pilot.pause()

        assert controller.view is View.FILE_PICKER


@pytest.mark.asyncio
async def test_textual_surface_attached(make_controller):
    """Without a surface the app supplies one; headless drivers cannot suspend."""
    controller = make_controller()
    controller.surface = None
    app = MuxpickApp(controller)

    assert isinstance(controller.surface, TextualSurface)

    async with app.run_test() as pilot:
        await pilot.pause()
        controller.surface.exit()
        assert controller.surface.suspended is False
        controller.surface.enter()
