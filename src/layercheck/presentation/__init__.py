"""Presentation layer: Python entry point, CLI and pytest plugin."""
