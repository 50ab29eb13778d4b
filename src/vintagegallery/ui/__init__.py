"""Gradio user interface for the gallery."""
