"""Unit tests for AudioFilePicker."""

from pathlib import Path

import pytest

from voice2text.exceptions import InputValidationError
from voice2text.host.file_picker import AudioFilePicker, is_audio_file
from voice2text.storage.file_manager import FileManager


@pytest.mark.unit
class TestAudioFilePicker:

    @pytest.mark.parametrize("name", ["a.wav", "b.mp3", "c.m4a", "d.flac", "e.ogg"])
    def test_audio_extensions_accepted(self, name):
        assert is_audio_file(Path(name)) is True

    @pytest.mark.parametrize("name", ["notes.txt", "slides.pdf", "photo.jpg", "no_extension"])
    def test_other_extensions_rejected(self, name):
        assert is_audio_file(Path(name)) is False

    def test_blank_input_cancels(self):
        assert AudioFilePicker().pick("   ") is None

    def test_pick_existing_audio(self, sample_m4a_file):
        selected = AudioFilePicker().pick(sample_m4a_file)

        assert selected.name == "meeting.m4a"
        assert selected.path == sample_m4a_file
        assert selected.has_audio is True

    def test_quoted_path_is_accepted(self, sample_audio_file):
        selected = AudioFilePicker().pick(f'"{sample_audio_file}"')

        assert selected.name == "lecture.wav"

    def test_missing_file_rejected(self, temp_data_dir):
        with pytest.raises(InputValidationError, match="File not found"):
            AudioFilePicker().pick(str(Path(temp_data_dir) / "missing.wav"))

    def test_non_audio_rejected(self, temp_data_dir):
        notes = Path(temp_data_dir) / "notes.txt"
        notes.write_text("hello", encoding='utf-8')

        with pytest.raises(InputValidationError, match="Not an audio file"):
            AudioFilePicker().pick(str(notes))

    def test_pick_copies_into_cache(self, temp_data_dir, sample_audio_file):
        file_manager = FileManager(Path(temp_data_dir) / "store")

        selected = AudioFilePicker(file_manager).pick(sample_audio_file)

        assert selected.name == "lecture.wav"
        assert Path(selected.path).parent == file_manager.cache_dir
        assert Path(selected.path).exists()
