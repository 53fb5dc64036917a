"""Transcription stage: audio handle in, transcript out."""
