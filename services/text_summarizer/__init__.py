"""Summarization stage: transcript in, Markdown summary out."""
