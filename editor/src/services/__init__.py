"""
Rect Canvas Editor - Engine Services

Hit testing, the pointer drag state machine, scene building, the Engine
that ties them together per frame, and renderer-side instance packing.
"""

from .engine import Engine, EngineSettings

__all__ = ['Engine', 'EngineSettings']
