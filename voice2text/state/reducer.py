"""Pure reducer: (AppState, action) -> AppState."""

import logging
from dataclasses import replace
from typing import Any, Callable, Dict

from ..models import actions
from ..models.state import AppState, LoginForm, ProcessingState, Screen, SelectedFile

logger = logging.getLogger(__name__)


def _login_form_changed(state: AppState, action: actions.LoginFormChanged) -> AppState:
    form = state.login
    if action.email is not None:
        form = replace(form, email=action.email)
    if action.password is not None:
        form = replace(form, password=action.password)
    return replace(state, login=form)


def _logged_in(state: AppState, action: actions.LoggedIn) -> AppState:
    return replace(state, is_authenticated=True, screen=Screen.DASHBOARD)


def _logged_out(state: AppState, action: actions.LoggedOut) -> AppState:
    # Sessions live for the whole process, so they survive a logout
    return replace(
        state,
        is_authenticated=False,
        screen=Screen.LOGIN,
        login=LoginForm(email=state.login.email),
    )


def _navigated(state: AppState, action: actions.Navigated) -> AppState:
    if action.screen is Screen.LOGIN:
        return replace(state, screen=Screen.LOGIN)
    if not state.is_authenticated:
        logger.debug(f"Ignoring navigation to {action.screen.value} before login")
        return state
    return replace(state, screen=action.screen)


def _file_selected(state: AppState, action: actions.FileSelected) -> AppState:
    processing = replace(state.processing, selected_file=action.file, transcript="", summary="")
    return replace(state, processing=processing)


def _transcription_started(state: AppState, action: actions.TranscriptionStarted) -> AppState:
    return replace(state, processing=replace(state.processing, is_transcribing=True))


def _transcription_succeeded(state: AppState, action: actions.TranscriptionSucceeded) -> AppState:
    return replace(
        state,
        processing=replace(state.processing, transcript=action.text),
        screen=Screen.TRANSCRIPT,
    )


def _transcription_finished(state: AppState, action: actions.TranscriptionFinished) -> AppState:
    return replace(state, processing=replace(state.processing, is_transcribing=False))


def _summary_started(state: AppState, action: actions.SummaryStarted) -> AppState:
    return replace(state, processing=replace(state.processing, is_summarizing=True))


def _summary_succeeded(state: AppState, action: actions.SummarySucceeded) -> AppState:
    return replace(
        state,
        processing=replace(state.processing, summary=action.text),
        screen=Screen.SUMMARY,
    )


def _summary_finished(state: AppState, action: actions.SummaryFinished) -> AppState:
    return replace(state, processing=replace(state.processing, is_summarizing=False))


def _transcript_edited(state: AppState, action: actions.TranscriptEdited) -> AppState:
    return replace(state, processing=replace(state.processing, transcript=action.text))


def _summary_edited(state: AppState, action: actions.SummaryEdited) -> AppState:
    return replace(state, processing=replace(state.processing, summary=action.text))


def _session_saved(state: AppState, action: actions.SessionSaved) -> AppState:
    return replace(state, sessions=(action.session,) + state.sessions)


def _session_opened(state: AppState, action: actions.SessionOpened) -> AppState:
    session = action.session
    processing = state.processing
    # Keep the audio path only when reopening the file that is already selected
    if processing.selected_file is not None and processing.selected_file.name == session.file_name:
        selected_file = processing.selected_file
    else:
        selected_file = SelectedFile(name=session.file_name, path="")
    processing = ProcessingState(
        selected_file=selected_file,
        transcript=session.transcript,
        summary=session.summary,
        is_transcribing=processing.is_transcribing,
        is_summarizing=processing.is_summarizing,
    )
    return replace(state, processing=processing, screen=Screen.TRANSCRIPT)


_HANDLERS: Dict[type, Callable[[AppState, Any], AppState]] = {
    actions.LoginFormChanged: _login_form_changed,
    actions.LoggedIn: _logged_in,
    actions.LoggedOut: _logged_out,
    actions.Navigated: _navigated,
    actions.FileSelected: _file_selected,
    actions.TranscriptionStarted: _transcription_started,
    actions.TranscriptionSucceeded: _transcription_succeeded,
    actions.TranscriptionFinished: _transcription_finished,
    actions.SummaryStarted: _summary_started,
    actions.SummarySucceeded: _summary_succeeded,
    actions.SummaryFinished: _summary_finished,
    actions.TranscriptEdited: _transcript_edited,
    actions.SummaryEdited: _summary_edited,
    actions.SessionSaved: _session_saved,
    actions.SessionOpened: _session_opened,
}


def reduce(state: AppState, action: Any) -> AppState:
    """Apply one action to the state and return the new state.

    Raises:
        TypeError: If the action type has no handler
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unknown action: {type(action).__name__}")
    return handler(state, action)
