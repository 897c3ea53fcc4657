"""Mixins used by the canvas widget."""
