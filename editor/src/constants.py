"""
Rect Canvas Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Camera limits and defaults
- Pointer interaction thresholds
- Overlay geometry (selection outlines, handles, marquee)
- The seed document shown on startup
- Host window / input tuning
"""

import numpy as np

# ======================================================================
# CAMERA
# ======================================================================
# Zoom is clamped to this inclusive range. ZOOM_MIN > 0 keeps every
# screen/world conversion free of division by zero.
ZOOM_MIN = 0.05
ZOOM_MAX = 64.0

DEFAULT_PAN = (0.0, 0.0)
DEFAULT_ZOOM = 1.0

# A zoom change smaller than this is treated as "no change" (clamped at a bound)
ZOOM_EPSILON = float(np.finfo(np.float32).eps)

# ======================================================================
# POINTER INTERACTION
# ======================================================================
# Screen-space distance a pressed pointer must travel before a press
# becomes a drag. Compared squared against the squared travel distance.
DRAG_THRESHOLD_PX = 6.0
DRAG_THRESHOLD_SQ = DRAG_THRESHOLD_PX * DRAG_THRESHOLD_PX

# ======================================================================
# OVERLAY GEOMETRY (screen pixels, divided by zoom when built)
# ======================================================================
SELECTION_OUTLINE_PX = 2.0
SELECTION_HANDLE_PX = 8.0
MARQUEE_OUTLINE_PX = 1.0

# RGBA, 0-1 floats
SELECTION_OUTLINE_COLOR = (0.95, 0.95, 0.95, 1.0)
SELECTION_HANDLE_COLOR = (0.1, 0.6, 1.0, 1.0)
MARQUEE_FILL_COLOR = (0.1, 0.6, 1.0, 0.15)
MARQUEE_OUTLINE_COLOR = (0.1, 0.6, 1.0, 0.9)

# ======================================================================
# DEFAULT DOCUMENT
# ======================================================================
# (pos, size, color) in world units, in paint order
DEFAULT_RECTS = [
    ((100.0, 100.0), (120.0, 80.0), (0.2, 0.7, 0.9, 1.0)),
    ((300.0, 220.0), (140.0, 80.0), (0.9, 0.3, 0.9, 1.0)),
    ((600.0, 900.0), (200.0, 100.0), (0.5, 0.8, 0.4, 1.0)),
]

# ======================================================================
# HOST WINDOW / INPUT
# ======================================================================
# Wheel zoom multiplier = exp(angle_delta_y * WHEEL_ZOOM_SENSITIVITY); Qt angleDelta is positive for wheel forward
WHEEL_ZOOM_SENSITIVITY = 0.0015

# One engine tick per frame (~60 fps)
FRAME_INTERVAL_MS = 16

DEFAULT_WINDOW_SIZE = (1024, 768)
CANVAS_MIN_SIZE = (320, 240)
CANVAS_BACKGROUND_COLOR = (0.11, 0.11, 0.13, 1.0)

CONFIG_DIR_NAME = '.rect_canvas_editor'
CONFIG_FILE_NAME = 'config.json'
