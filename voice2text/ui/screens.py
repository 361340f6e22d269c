"""Rich renderables for each screen."""

from typing import Any, Dict, Optional

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models.alerts import Alert
from ..models.state import AppState, Screen

APP_TITLE = "Voice2Text"
PREVIEW_CHARS = 240

TRANSCRIPT_PLACEHOLDER = "Transcript will appear here after processing your audio file."
SUMMARY_PLACEHOLDER = "Key points summary will appear here after you generate it from the transcript."
LAST_TRANSCRIPT_PLACEHOLDER = "Your latest transcript will appear here after you process a file."
NO_SESSIONS_PLACEHOLDER = 'Saved sessions will appear here after you run "save" on the dashboard.'
DEFAULT_ACCOUNT_EMAIL = "student@example.edu"


def _preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    text = " ".join(text.split())
    return text if len(text) <= limit else text[:limit - 1] + "…"


def _title(text: str) -> Text:
    return Text(text, style="bold blue", justify="center")


def _bottom_nav(state: AppState) -> Text:
    active = state.screen
    items = [
        ("home", active in (Screen.DASHBOARD, Screen.TRANSCRIPT, Screen.SUMMARY)),
        ("files", active is Screen.FILES),
        ("profile", active is Screen.PROFILE),
    ]
    nav = Text()
    for name, is_active in items:
        nav.append(f"  {name}  ", style="bold reverse" if is_active else "dim")
    nav.append("   help · quit", style="dim")
    return nav


def _tabs(state: AppState) -> Text:
    tabs = Text()
    for screen in (Screen.TRANSCRIPT, Screen.SUMMARY):
        label = f" {screen.value.capitalize()} "
        tabs.append(label, style="bold reverse" if state.screen is screen else "dim")
        tabs.append(" ")
    return tabs


def render_login(state: AppState) -> RenderableType:
    form = Table.grid(padding=(0, 2))
    form.add_row("Email", state.login.email or Text("you@example.com", style="dim"))
    form.add_row("Password", "•" * len(state.login.password) or Text("••••••••", style="dim"))
    return Group(
        _title(APP_TITLE),
        Align.center(Panel(form, title="Log in", width=50)),
        Align.center(Text("Type `login` to sign in, `quit` to exit.", style="dim")),
    )


def render_dashboard(state: AppState) -> RenderableType:
    processing = state.processing
    upload = Text()
    upload.append("Upload lecture audio, meetings, or voice notes and generate a transcript + key point summary.\n\n")
    if processing.selected_file_name:
        upload.append(f"Selected: {processing.selected_file_name}\n", style="bold")
    upload.append("choose <path>", style="cyan")
    upload.append("   ")
    upload.append("Transcribing..." if processing.is_transcribing else "start", style="cyan")

    last = Text(_preview(processing.transcript) if processing.transcript else LAST_TRANSCRIPT_PLACEHOLDER)
    actions = Text("summarize   save", style="cyan")

    return Group(
        _title(APP_TITLE),
        Panel(upload, title="Upload or record"),
        Panel(last, title="Last transcript"),
        Panel(actions, title="Quick actions"),
        _bottom_nav(state),
    )


def render_text_screen(state: AppState) -> RenderableType:
    processing = state.processing
    if state.screen is Screen.SUMMARY:
        body = processing.summary or SUMMARY_PLACEHOLDER
        commands = "copy   transcript   export"
    else:
        body = processing.transcript or TRANSCRIPT_PLACEHOLDER
        summary_label = "Summarizing..." if processing.is_summarizing else "summarize"
        commands = f"copy   {summary_label}   export"

    return Group(
        _title(f"Session — {state.current_session_title}"),
        _tabs(state),
        Panel(Text(body)),
        Text(f"{commands}   save   edit {state.screen.value}", style="cyan"),
        _bottom_nav(state),
    )


def render_files(state: AppState) -> RenderableType:
    if not state.sessions:
        listing: RenderableType = Text(NO_SESSIONS_PLACEHOLDER, style="dim")
    else:
        listing = Table("#", "Title", "File", "Preview", expand=True)
        for position, session in enumerate(state.sessions, start=1):
            listing.add_row(str(position), session.title, session.file_name, _preview(session.preview, 80))

    return Group(
        _title(APP_TITLE),
        Panel(listing, title="My Files"),
        Text("open <#>", style="cyan"),
        _bottom_nav(state),
    )


def render_profile(state: AppState,
                   api_key_configured: bool = False,
                   storage_stats: Optional[Dict[str, Any]] = None) -> RenderableType:
    account = Table.grid(padding=(0, 2))
    account.add_row("Account", state.login.email or DEFAULT_ACCOUNT_EMAIL)
    account.add_row("Subscription", "Free: 60 minutes / month")
    account.add_row("API key", Text("configured", style="green") if api_key_configured else Text("missing", style="red"))
    if storage_stats:
        account.add_row("Data directory", storage_stats["data_directory"])
        account.add_row("Cached audio", f"{storage_stats['cached_audio_files']} files ({storage_stats['cache_size_mb']} MB)")
        account.add_row("Exports", str(storage_stats["export_files"]))

    return Group(
        _title("Profile & Settings"),
        Panel(account),
        Text("logout", style="cyan"),
        _bottom_nav(state),
    )


def render_screen(state: AppState,
                  api_key_configured: bool = False,
                  storage_stats: Optional[Dict[str, Any]] = None) -> RenderableType:
    """Render whichever screen is active."""
    if state.screen is Screen.LOGIN:
        return render_login(state)
    if state.screen is Screen.DASHBOARD:
        return render_dashboard(state)
    if state.screen in (Screen.TRANSCRIPT, Screen.SUMMARY):
        return render_text_screen(state)
    if state.screen is Screen.FILES:
        return render_files(state)
    return render_profile(state, api_key_configured, storage_stats)


def render_alert(alert: Alert) -> RenderableType:
    style = "red" if alert.kind.is_error else "green"
    return Panel(Text(alert.message), title=alert.title, border_style=style)
