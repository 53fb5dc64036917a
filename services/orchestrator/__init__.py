"""Orchestrator: sequences the transcription and summarization stages."""
