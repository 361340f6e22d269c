"""Unit tests for the command-line entry point."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

from voice2text import main as main_module


class RecordingTerminal:
    """Replaces TerminalApp; remembers the app it was given."""

    instances = []

    def __init__(self, app):
        self.app = app
        RecordingTerminal.instances.append(self)

    async def run(self):
        pass


@pytest.fixture
def recording_terminal(monkeypatch):
    RecordingTerminal.instances = []
    monkeypatch.setattr(main_module, "TerminalApp", RecordingTerminal)
    monkeypatch.setattr(main_module, "setup_logging", Mock())
    return RecordingTerminal


@pytest.mark.unit
class TestMain:

    def test_loads_the_given_config(self, write_config, recording_terminal, monkeypatch):
        config = write_config({
            "openai": {"api_key": "sk-from-file"},
            "storage": {"data_directory": "data"},
        })
        monkeypatch.setattr(sys, "argv", ["voice2text", "--config", str(config.config_file)])

        main_module.main()

        app = recording_terminal.instances[0].app
        assert app.config.get_openai_api_key() == "sk-from-file"
        assert Path(app.file_manager.cache_dir).exists()
        main_module.setup_logging.assert_called_once_with(app.config, "INFO")

    def test_log_level_flag_overrides_config(self, write_config, recording_terminal, monkeypatch):
        config = write_config({"storage": {"data_directory": "data"}})
        monkeypatch.setattr(sys, "argv", ["voice2text", "--config", str(config.config_file), "--log-level", "DEBUG"])

        main_module.main()

        assert main_module.setup_logging.call_args.args[1] == "DEBUG"

    def test_missing_config_file_exits(self, temp_data_dir, recording_terminal, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["voice2text", "--config", str(Path(temp_data_dir) / "nope.yaml")])

        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == 1
        assert recording_terminal.instances == []
