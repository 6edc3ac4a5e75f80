#!/usr/bin/env python3
"""
screenflow menu demo

A small Textual app whose screens are screenflow views: a main menu, a
settings window loaded on demand through the window registry, a shop and a
pause overlay. Press "b" to go back and "p" to toggle the pause overlay.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Button, Footer, Header, Static

from screenflow import AssetCatalog, Coordinator, UiRuntime, UiView, UiWindow, create_animation
from screenflow.host import ViewHost
from screenflow.logging_config import configure_logging


class MainMenuScreen(UiView):
    def compose_content(self):
        yield Static("[b]Main menu[/b]")
        yield Button("Settings", id="open-settings")
        yield Button("Shop", id="open-shop")


class ShopScreen(UiView):
    def compose_content(self):
        yield Static("[b]Shop[/b]\nNothing for sale today.")
        yield Button("Back", id="back")


class SettingsWindow(UiWindow):
    def compose_content(self):
        yield Static("[b]Settings[/b]\nLoaded through the window registry.")
        yield Button("Back", id="back")


class PauseOverlay(UiView):
    def compose_content(self):
        yield Static("[reverse] Paused [/reverse]")


class MenuFlow(Coordinator):
    def __init__(self, runtime: UiRuntime, owner):
        super().__init__("MenuFlow")
        self.runtime = runtime
        self.owner = owner

    async def run(self) -> None:
        self.register(MainMenuScreen(parent=self.owner, animation=create_animation("fade")))
        self.register(ShopScreen(parent=self.owner, animation=create_animation("slide")))
        self.register(PauseOverlay(parent=self.owner, animation=create_animation("fade")))
        self.enable_back_navigation()
        await self.navigate_to(MainMenuScreen)

    async def open_settings(self) -> None:
        if not self.is_registered(SettingsWindow):
            window = await self.runtime.windows.get_or_create_window(SettingsWindow)
            if window is None:
                return
            window.animation = create_animation("slide")
            self.register(window)
        await self.navigate_to(SettingsWindow)

    async def toggle_pause(self) -> None:
        overlay = self.get_view(PauseOverlay)
        if overlay is not None and overlay.is_visible:
            await self.close_overlay(PauseOverlay)
        else:
            await self.show_overlay(PauseOverlay)


class MenuDemoApp(App):
    BINDINGS = [
        Binding("b", "back", "Back"),
        Binding("p", "pause", "Pause"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self):
        super().__init__()
        catalog = AssetCatalog(load_delay=0.2)
        catalog.register_window(SettingsWindow, "MainMenu")
        self.runtime = UiRuntime(catalog, current_context="MainMenu")
        self.owner = self.runtime.create_owner("MainMenu")
        self.flow = MenuFlow(self.runtime, self.owner)

    def compose(self) -> ComposeResult:
        yield Header()
        yield ViewHost(self.owner)
        yield Footer()

    def on_mount(self) -> None:
        self.run_worker(self.flow.run())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "open-settings":
            self.run_worker(self.flow.open_settings())
        elif event.button.id == "open-shop":
            self.run_worker(self.flow.navigate_to(ShopScreen))
        elif event.button.id == "back":
            self.action_back()

    def action_back(self) -> None:
        self.run_worker(self.flow.navigate_back())

    def action_pause(self) -> None:
        self.run_worker(self.flow.toggle_pause())

    async def on_unmount(self) -> None:
        await self.runtime.shutdown()


if __name__ == "__main__":
    configure_logging({"console": False, "log_file": "screenflow_demo.log"})
    MenuDemoApp().run()
