"""Unit tests for ExportService."""

from unittest.mock import Mock

import pytest

from voice2text.host.clipboard import Clipboard
from voice2text.host.share import FileShareTarget, ShareTarget
from voice2text.models.actions import FileSelected, SummarySucceeded, TranscriptionSucceeded
from voice2text.models.alerts import AlertKind
from voice2text.models.state import SelectedFile
from voice2text.services.export_service import ExportService, build_export_text
from voice2text.storage.file_manager import FileManager


@pytest.fixture
def clipboard():
    return Mock(spec=Clipboard)


@pytest.fixture
def share_target():
    target = Mock(spec=ShareTarget)
    target.share.return_value = "/exports/export.txt"
    return target


@pytest.fixture
def export(logged_in_store, alerts, share_target, clipboard):
    return ExportService(logged_in_store, alerts, share_target, clipboard)


@pytest.mark.unit
class TestExport:

    def test_export_text_layout(self, logged_in_store):
        logged_in_store.dispatch(FileSelected(SelectedFile("talk.m4a", "/tmp/talk.m4a")))
        logged_in_store.dispatch(TranscriptionSucceeded("hello world"))
        logged_in_store.dispatch(SummarySucceeded("- hello"))

        text = build_export_text(logged_in_store.state)

        assert text == "Session: talk.m4a\n\nTranscript:\nhello world\n\nSummary:\n- hello"

    def test_export_with_nothing_is_refused(self, export, share_target, alert_log):
        assert export.export_current_session() is False

        share_target.share.assert_not_called()
        assert alert_log.last.title == "Nothing to export"

    def test_export_shares_combined_text(self, export, logged_in_store, share_target, alert_log):
        logged_in_store.dispatch(TranscriptionSucceeded("hello world"))

        assert export.export_current_session() is True

        share_target.share.assert_called_once_with(build_export_text(logged_in_store.state))
        assert alert_log.last.title == "Exported"

    def test_share_failure_alerts(self, export, logged_in_store, share_target, alert_log):
        share_target.share.side_effect = OSError("disk full")
        logged_in_store.dispatch(TranscriptionSucceeded("hello world"))

        assert export.export_current_session() is False

        assert alert_log.last.kind is AlertKind.TRANSPORT
        assert alert_log.last.message == "Could not open share sheet."

    def test_file_share_target_writes_export(self, logged_in_store, alerts, clipboard, temp_data_dir):
        file_manager = FileManager(temp_data_dir)
        export = ExportService(logged_in_store, alerts, FileShareTarget(file_manager), clipboard)
        logged_in_store.dispatch(SummarySucceeded("- key point"))

        assert export.export_current_session() is True

        exported = list(file_manager.exports_dir.iterdir())
        assert len(exported) == 1
        assert exported[0].read_text(encoding='utf-8').endswith("Summary:\n- key point")


@pytest.mark.unit
class TestCopy:

    @pytest.mark.parametrize("text", ["", "  ", "\n"])
    def test_copy_blank_is_refused(self, export, clipboard, alert_log, text):
        assert export.copy_text(text) is False

        clipboard.write.assert_not_called()
        assert alert_log.last.title == "Nothing to copy"

    def test_copy_writes_clipboard(self, export, clipboard, alert_log):
        assert export.copy_text("some text") is True

        clipboard.write.assert_called_once_with("some text")
        assert alert_log.last.title == "Copied"

    def test_copy_transcript_and_summary(self, export, logged_in_store, clipboard):
        logged_in_store.dispatch(TranscriptionSucceeded("the transcript"))
        logged_in_store.dispatch(SummarySucceeded("- the summary"))

        export.copy_transcript()
        export.copy_summary()

        assert [c.args[0] for c in clipboard.write.call_args_list] == ["the transcript", "- the summary"]

    def test_clipboard_failure_alerts(self, export, clipboard, alert_log):
        clipboard.write.side_effect = RuntimeError("no display")

        assert export.copy_text("text") is False

        assert alert_log.last.kind is AlertKind.TRANSPORT
