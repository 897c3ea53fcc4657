"""Renderer-side packing of scene instances.

A renderer uploads instances as a flat float32 buffer, eight floats per
rect: pos.x, pos.y, size.x, size.y, r, g, b, a.
"""
import numpy as np

from models.scene import CameraView

INSTANCE_FLOATS = 8


def pack_instances(rects) -> np.ndarray:
	"""Pack RectInstances into an (N, 8) float32 array, preserving order."""
	rects = list(rects)
	buffer = np.zeros((len(rects), INSTANCE_FLOATS), dtype=np.float32)
	for row, inst in enumerate(rects):
		buffer[row, 0:2] = inst.pos
		buffer[row, 2:4] = inst.size
		buffer[row, 4:8] = inst.color
	return buffer


def project_to_screen(instances: np.ndarray, camera: CameraView) -> np.ndarray:
	"""World-space instance buffer -> screen-pixel buffer for the given camera.

	Positions become (pos - pan) * zoom, sizes are scaled by zoom, colors
	pass through. The input array is not modified.
	"""
	out = np.array(instances, dtype=np.float32, copy=True)
	if out.size == 0:
		return out.reshape(0, INSTANCE_FLOATS)
	pan = np.array([camera.pan.x, camera.pan.y], dtype=np.float32)
	out[:, 0:2] = (out[:, 0:2] - pan) * np.float32(camera.zoom)
	out[:, 2:4] = out[:, 2:4] * np.float32(camera.zoom)
	return out


def to_bytes(instances: np.ndarray) -> bytes:
	"""Raw little-endian float32 bytes ready for a GPU vertex buffer upload."""
	return np.ascontiguousarray(instances, dtype='<f4').tobytes()
