"""Voice2Text: transcribe audio files and summarize the key points."""

__version__ = "0.1.0"
