# test_textual_host.py
# Description: Tests for presenting screenflow views inside a Textual app
#
# Imports
import pytest
#
# 3rd-Party Imports
from textual.app import App, ComposeResult
from textual.widgets import Static
#
# Local Imports
from screenflow.host.textual_host import ViewHost, ViewWidget
from screenflow.views.view import UiView
#
########################################################################################################################
#
# Test Fixtures:

class GreetingView(UiView):
    def compose_content(self):
        yield Static("Welcome back", id="greeting")


class HostApp(App):
    def __init__(self, owner):
        super().__init__()
        self.owner = owner

    def compose(self) -> ComposeResult:
        yield ViewHost(self.owner, id="host")


@pytest.fixture
def greeting(owner):
    return GreetingView(parent=owner)

########################################################################################################################
#
# ViewHost Tests:

class TestViewHost:

    @pytest.mark.asyncio
    async def test_composes_widget_per_child(self, owner, greeting):
        app = HostApp(owner)
        async with app.run_test() as pilot:
            await pilot.pause()
            host = app.query_one(ViewHost)
            widget = host.widget_for(greeting)

            assert isinstance(widget, ViewWidget)
            assert widget.query_one("#greeting", Static) is not None
            # Views start hidden.
            assert widget.display is False

    @pytest.mark.asyncio
    async def test_sync_copies_view_state(self, owner, greeting):
        app = HostApp(owner)
        async with app.run_test() as pilot:
            await pilot.pause()
            widget = app.query_one(ViewHost).widget_for(greeting)

            greeting.show_without_animation()
            greeting.canvas_group.alpha = 0.5
            widget.sync_from_view()

            assert widget.display is True
            assert widget.disabled is False
            assert widget.styles.opacity == pytest.approx(0.5)

            greeting.is_interactable = False
            greeting.rect_transform.anchored_position = (12.0, 0.0)
            widget.sync_from_view()
            assert widget.disabled is True
            assert widget.styles.offset.x.value == 12

    @pytest.mark.asyncio
    async def test_reports_size_back_to_view(self, owner, greeting):
        greeting.show_without_animation()
        app = HostApp(owner)
        async with app.run_test(size=(60, 20)) as pilot:
            await pilot.pause()
            widget = app.query_one(ViewHost).widget_for(greeting)
            widget.sync_from_view()

            assert greeting.size[0] > 0
            assert greeting.size[1] > 0

    @pytest.mark.asyncio
    async def test_follows_attach_and_detach(self, owner):
        app = HostApp(owner)
        async with app.run_test() as pilot:
            host = app.query_one(ViewHost)

            late = UiView(name="Late", parent=owner)
            await pilot.pause()
            widget = host.widget_for(late)
            assert widget is not None
            assert widget in host.children

            owner.detach(late)
            await pilot.pause()
            assert host.widget_for(late) is None
            assert widget not in host.children

#
# End of test_textual_host.py
########################################################################################################################
