"""Presentation layer: Python API, CLI and pytest plugin."""
