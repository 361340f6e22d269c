"""Interactive terminal front end."""

import asyncio
import functools
import logging
from typing import List, Optional

from pubsub import pub
from rich.console import Console
from rich.table import Table

from ..app import Voice2TextApp
from ..models.actions import SummaryStarted, TranscriptionStarted
from ..models.alerts import Alert
from ..models.state import AppState, Screen
from .screens import render_alert, render_screen

logger = logging.getLogger(__name__)

NAVIGATION_COMMANDS = {
    "home": Screen.DASHBOARD,
    "dashboard": Screen.DASHBOARD,
    "transcript": Screen.TRANSCRIPT,
    "summary": Screen.SUMMARY,
    "files": Screen.FILES,
    "profile": Screen.PROFILE,
}

HELP_ROWS = [
    ("login", "Log in (any email and password)"),
    ("logout", "Back to the login screen"),
    ("home · files · profile", "Switch screens"),
    ("transcript · summary", "Switch between transcript and summary"),
    ("choose <path>", "Pick an audio file"),
    ("start", "Transcribe the selected file"),
    ("summarize", "Summarize the current transcript"),
    ("save", "Save transcript and summary to My Files"),
    ("open <#>", "Open a saved session"),
    ("copy [transcript|summary]", "Copy text to the clipboard"),
    ("export", "Export the session text"),
    ("edit transcript|summary", "Replace the current text"),
    ("quit", "Exit"),
]


class TerminalApp:
    """Reads commands, runs them against the app, and redraws the screen."""

    def __init__(self, app: Voice2TextApp, console: Optional[Console] = None):
        """Initialize terminal front end.

        Args:
            app: Wired application
            console: Rich console to draw on
        """
        self.app = app
        self.console = console or Console()
        self.pending_alerts: List[Alert] = []
        self.running = False

        pub.subscribe(self.on_alert, app.alerts.topic)
        pub.subscribe(self.on_state_changed, app.store.topic)
        logger.info("TerminalApp initialized")

    def on_alert(self, alert: Alert) -> None:
        self.pending_alerts.append(alert)

    def on_state_changed(self, state: AppState, action: object) -> None:
        # The loop is blocked on the request while these run, so say so now
        if isinstance(action, TranscriptionStarted):
            self.console.print("Transcribing...", style="blue")
        elif isinstance(action, SummaryStarted):
            self.console.print("Summarizing...", style="blue")

    def render(self) -> None:
        self.console.clear()
        state = self.app.store.state
        stats = self.app.file_manager.get_storage_stats() if state.screen is Screen.PROFILE else None
        self.console.print(render_screen(state, self.app.config.has_api_key(), stats))
        for alert in self.pending_alerts:
            self.console.print(render_alert(alert))
        self.pending_alerts.clear()

    def show_help(self) -> None:
        table = Table("Command", "What it does", title="Commands")
        for command, description in HELP_ROWS:
            table.add_row(command, description)
        self.console.print(table)

    async def prompt(self, message: str, password: bool = False) -> str:
        """Read one line without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(self.console.input, message, password=password))

    async def run(self) -> None:
        """Main loop until `quit` or end of input."""
        self.running = True
        try:
            while self.running:
                self.render()
                try:
                    line = await self.prompt("> ")
                except EOFError:
                    break
                await self.handle_command(line)
        finally:
            self.close()

    def close(self) -> None:
        self.running = False
        pub.unsubscribe(self.on_alert, self.app.alerts.topic)
        pub.unsubscribe(self.on_state_changed, self.app.store.topic)
        logger.info("TerminalApp stopped")

    async def handle_command(self, line: str) -> None:
        """Run one typed command."""
        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        argument = argument.strip()
        state = self.app.store.state

        if not command:
            return
        logger.debug(f"Command: {command} {argument}")

        if command in ("quit", "q", "exit"):
            self.running = False
        elif command == "help":
            self.show_help()
            await self.prompt("Press Enter to continue")
        elif command == "login":
            await self._login()
        elif state.screen is Screen.LOGIN:
            self.app.alerts.validation_error("Login", "Type `login` to sign in first.")
        elif command == "logout":
            self.app.navigation.logout()
        elif command in NAVIGATION_COMMANDS:
            self.app.navigation.navigate(NAVIGATION_COMMANDS[command])
        elif command == "choose":
            path = argument or await self.prompt("Audio file path (blank to cancel): ")
            self.app.processing.choose_file(path)
        elif command == "start":
            await self.app.processing.start_processing()
        elif command == "summarize":
            await self.app.processing.generate_summary()
        elif command == "save":
            self.app.sessions.save_current_session()
        elif command == "open":
            self._open(argument)
        elif command == "copy":
            self._copy(argument or ("summary" if state.screen is Screen.SUMMARY else "transcript"))
        elif command == "export":
            self.app.export.export_current_session()
        elif command == "edit":
            await self._edit(argument)
        else:
            self.app.alerts.validation_error("Unknown command", f"`{command}` is not a command. Type `help`.")

    async def _login(self) -> None:
        email = await self.prompt("Email: ")
        password = await self.prompt("Password: ", password=True)
        self.app.navigation.update_login_form(email=email.strip(), password=password)
        self.app.navigation.login()

    def _open(self, argument: str) -> None:
        try:
            position = int(argument)
        except ValueError:
            self.app.alerts.validation_error("Open", "Usage: open <#> (see the files screen).")
            return
        self.app.sessions.open_session_at(position)

    def _copy(self, target: str) -> None:
        if target == "summary":
            self.app.export.copy_summary()
        elif target == "transcript":
            self.app.export.copy_transcript()
        else:
            self.app.alerts.validation_error("Copy", "Usage: copy [transcript|summary]")

    async def _edit(self, target: str) -> None:
        if target not in ("transcript", "summary"):
            self.app.alerts.validation_error("Edit", "Usage: edit transcript|summary")
            return
        text = await self.prompt(f"New {target}: ")
        if target == "transcript":
            self.app.processing.edit_transcript(text)
        else:
            self.app.processing.edit_summary(text)
