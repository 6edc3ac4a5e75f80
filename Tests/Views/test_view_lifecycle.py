# test_view_lifecycle.py
# Description: Tests for the UiView show/hide lifecycle and UiWindow notifications
#
# Imports
import asyncio
import pytest
from unittest.mock import Mock
#
# Local Imports
from screenflow.Animation.fade import FadeAnimation, FadeConfig
from screenflow.state.view_state import ViewState
from screenflow.views.view import UiView
from screenflow.views.window import UiWindow
#
########################################################################################################################
#
# Test Fixtures:

FAST_FADE = FadeConfig(show_duration=0.2, hide_duration=0.2)


@pytest.fixture
def fade(tweener):
    return FadeAnimation(FAST_FADE, tweener)


@pytest.fixture
def animated_view(owner, fade):
    """A view attached to an active owner, so its transitions animate."""
    return UiView(name="Animated", animation=fade, parent=owner)


class SettingsWindow(UiWindow):
    pass

########################################################################################################################
#
# Immediate Transitions:

class TestImmediateTransitions:
    """Views without animation or without an active parent switch state at once."""

    @pytest.mark.asyncio
    async def test_show_is_idempotent(self):
        view = UiView()
        assert view.state is ViewState.HIDDEN

        assert await view.show_async() is True
        assert view.state is ViewState.VISIBLE
        assert await view.show_async() is False
        assert view.state is ViewState.VISIBLE

    @pytest.mark.asyncio
    async def test_close_hidden_view_is_noop(self):
        view = UiView()
        assert await view.close_async() is False
        assert view.state is ViewState.HIDDEN

    @pytest.mark.asyncio
    async def test_detached_view_skips_animation(self, fade):
        view = UiView(animation=fade)
        assert view.parent is None

        assert await view.show_async() is True
        assert view.state is ViewState.VISIBLE
        assert view.canvas_group.alpha == 1.0
        assert fade.tweener.active_tweens() == []

        assert await view.close_async() is True
        assert view.state is ViewState.HIDDEN
        assert view.canvas_group.alpha == 0.0

    @pytest.mark.asyncio
    async def test_inactive_owner_skips_animation(self, runtime, fade):
        inactive = runtime.create_owner("Hidden", active=False)
        view = UiView(animation=fade, parent=inactive)

        assert await view.show_async() is True
        assert view.state is ViewState.VISIBLE
        assert view.canvas_group.alpha == 1.0

    def test_show_without_animation_respects_interactable_flag(self):
        view = UiView(interactable=False)
        view.show_without_animation()

        assert view.state is ViewState.VISIBLE
        assert view.is_interactable is False
        assert view.canvas_group.blocks_input is False

    def test_close_without_animation_disables_input(self, fade):
        view = UiView(animation=fade)
        view.show_without_animation()
        assert view.is_interactable is True

        view.close_without_animation()
        assert view.state is ViewState.HIDDEN
        assert view.is_interactable is False
        assert view.canvas_group.alpha == 0.0

    def test_active_in_hierarchy_requires_parent(self, owner):
        view = UiView()
        assert view.is_active_in_hierarchy is False
        owner.attach(view)
        assert view.is_active_in_hierarchy is True
        view.active = False
        assert view.is_active_in_hierarchy is False

########################################################################################################################
#
# Animated Transitions:

class TestAnimatedTransitions:
    """Transitions on attached views, including overlapping requests."""

    @pytest.mark.asyncio
    async def test_show_passes_through_showing(self, animated_view):
        task = asyncio.create_task(animated_view.show_async())
        await asyncio.sleep(0)

        assert animated_view.state is ViewState.SHOWING
        assert animated_view.is_visible is True

        assert await task is True
        assert animated_view.state is ViewState.VISIBLE
        assert animated_view.canvas_group.alpha == 1.0
        assert animated_view.is_interactable is True

    @pytest.mark.asyncio
    async def test_input_disabled_before_hide_starts(self, animated_view):
        animated_view.show_without_animation()
        task = asyncio.create_task(animated_view.close_async())
        await asyncio.sleep(0)

        assert animated_view.state is ViewState.HIDING
        assert animated_view.is_interactable is False
        assert animated_view.is_visible is False
        assert await animated_view.close_async() is False

        assert await task is True
        assert animated_view.state is ViewState.HIDDEN
        assert animated_view.canvas_group.alpha == 0.0

    @pytest.mark.asyncio
    async def test_close_during_show_wins(self, animated_view):
        show_task = asyncio.create_task(animated_view.show_async())
        await asyncio.sleep(0.01)
        assert animated_view.state is ViewState.SHOWING

        assert await animated_view.close_async() is True
        assert await show_task is False
        assert animated_view.state is ViewState.HIDDEN
        assert animated_view.is_interactable is False
        assert animated_view.canvas_group.alpha == 0.0

    @pytest.mark.asyncio
    async def test_show_during_close_wins(self, animated_view):
        animated_view.show_without_animation()
        close_task = asyncio.create_task(animated_view.close_async())
        await asyncio.sleep(0.01)
        assert animated_view.state is ViewState.HIDING

        assert await animated_view.show_async() is True
        assert await close_task is False
        assert animated_view.state is ViewState.VISIBLE
        assert animated_view.is_interactable is True
        assert animated_view.canvas_group.alpha == 1.0

    @pytest.mark.asyncio
    async def test_immediate_close_abandons_running_show(self, animated_view):
        show_task = asyncio.create_task(animated_view.show_async())
        await asyncio.sleep(0.01)

        animated_view.close_without_animation()
        assert await show_task is False
        assert animated_view.state is ViewState.HIDDEN

    @pytest.mark.asyncio
    async def test_close_without_animation_strategy_still_passes_hiding(self, owner):
        view = UiView(parent=owner)
        view.show_without_animation()

        assert await view.close_async() is True
        assert view.state is ViewState.HIDDEN
        assert view.is_interactable is False

    @pytest.mark.asyncio
    async def test_fire_and_forget_show(self, animated_view, drained):
        task = animated_view.show()
        assert isinstance(task, asyncio.Task)
        await task
        assert animated_view.state is ViewState.VISIBLE

        await animated_view.close()
        assert animated_view.state is ViewState.HIDDEN

########################################################################################################################
#
# Window Notifications:

class TestUiWindow:
    """UiWindow starts closed and reports completed transitions."""

    def test_window_starts_hidden(self, fade):
        window = SettingsWindow(animation=fade)
        assert window.state is ViewState.HIDDEN
        assert window.canvas_group.alpha == 0.0
        assert window.is_interactable is False
        assert window.is_alive is True

    @pytest.mark.asyncio
    async def test_shown_and_hidden_events(self, owner, fade):
        window = SettingsWindow(animation=fade, parent=owner)
        shown, hidden = Mock(), Mock()
        window.on_shown.connect(shown)
        window.on_hidden.connect(hidden)

        await window.show_async()
        await window.show_async()
        shown.assert_called_once_with(window)

        await window.close_async()
        hidden.assert_called_once_with(window)

    @pytest.mark.asyncio
    async def test_abandoned_show_does_not_fire_shown(self, owner, fade):
        window = SettingsWindow(animation=fade, parent=owner)
        shown = Mock()
        window.on_shown.connect(shown)

        show_task = asyncio.create_task(window.show_async())
        await asyncio.sleep(0.01)
        await window.close_async()

        assert await show_task is False
        shown.assert_not_called()

    def test_destroy_is_idempotent(self, owner):
        window = SettingsWindow(parent=owner)
        destroyed = Mock()
        window.on_destroyed.connect(destroyed)

        window.destroy()
        window.destroy()

        destroyed.assert_called_once_with(window)
        assert window.is_alive is False
        assert window.parent is None
        assert window not in owner.children

#
# End of test_view_lifecycle.py
########################################################################################################################
