"""Input batch decoding and engine output encoding.

Wire format (JSON-compatible):

	batch  = {"events": [event, ...]}   (a bare list of events is also accepted)
	event  = {"type": "<snake_case tag>", ...fields}
	point  = {"x": float, "y": float}

	{"type": "camera_pan_by_screen_delta", "delta_px": point}
	{"type": "camera_zoom_at_screen_point", "pivot_px": point, "zoom_multiplier": float}
	{"type": "pointer_down", "screen_px": point, "shift": bool?, "button": int?}
	{"type": "pointer_move", "screen_px": point, "buttons": int?}
	{"type": "pointer_up", "screen_px": point, "button": int?}
	{"type": "pointer_cancel"}

The engine assumes well-formed input; every check happens here.
"""
import json
import logging
import math

from models.events import (
	EVENT_TYPES, Buttons, CameraPanByScreenDelta, CameraZoomAtScreenPoint,
	PointerButton, PointerCancel, PointerDown, PointerMove, PointerUp,
)
from models.transform import Vec2

logger = logging.getLogger(__name__)


class BatchDecodeError(ValueError):
	"""Raised when an input batch does not match the wire format."""

	def __init__(self, message):
		super().__init__(f"Invalid InputBatch: {message}")


def _number(obj, key, where):
	if key not in obj:
		raise BatchDecodeError(f"{where}: missing field '{key}'")
	value = obj[key]
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		raise BatchDecodeError(f"{where}: field '{key}' must be a number, got {value!r}")
	value = float(value)
	if not math.isfinite(value):
		raise BatchDecodeError(f"{where}: field '{key}' must be finite, got {value!r}")
	return value


def _point(obj, key, where):
	if key not in obj:
		raise BatchDecodeError(f"{where}: missing field '{key}'")
	value = obj[key]
	if not isinstance(value, dict):
		raise BatchDecodeError(f"{where}: field '{key}' must be an object with x and y")
	return Vec2(_number(value, 'x', f"{where}.{key}"), _number(value, 'y', f"{where}.{key}"))


def _flag(obj, key, where, default=False):
	value = obj.get(key, default)
	if not isinstance(value, bool):
		raise BatchDecodeError(f"{where}: field '{key}' must be a boolean, got {value!r}")
	return value


def _int(obj, key, where, default=0):
	value = obj.get(key, default)
	if isinstance(value, bool) or not isinstance(value, int):
		raise BatchDecodeError(f"{where}: field '{key}' must be an integer, got {value!r}")
	return value


def _button(obj, where):
	value = _int(obj, 'button', where)
	try:
		return PointerButton(value)
	except ValueError:
		raise BatchDecodeError(f"{where}: unknown button {value}") from None


def decode_event(obj, where='event'):
	"""Decode one event dict into its InputEvent dataclass."""
	if not isinstance(obj, dict):
		raise BatchDecodeError(f"{where}: expected an object, got {type(obj).__name__}")
	tag = obj.get('type')
	cls = EVENT_TYPES.get(tag) if isinstance(tag, str) else None
	if cls is None:
		raise BatchDecodeError(f"{where}: unknown event type {tag!r}")

	if cls is CameraPanByScreenDelta:
		return CameraPanByScreenDelta(delta_px=_point(obj, 'delta_px', where))
	if cls is CameraZoomAtScreenPoint:
		multiplier = _number(obj, 'zoom_multiplier', where)
		if multiplier <= 0:
			raise BatchDecodeError(f"{where}: zoom_multiplier must be positive, got {multiplier}")
		return CameraZoomAtScreenPoint(pivot_px=_point(obj, 'pivot_px', where), zoom_multiplier=multiplier)
	if cls is PointerDown:
		return PointerDown(
			screen_px=_point(obj, 'screen_px', where),
			shift=_flag(obj, 'shift', where),
			button=_button(obj, where),
		)
	if cls is PointerMove:
		return PointerMove(
			screen_px=_point(obj, 'screen_px', where),
			buttons=Buttons(_int(obj, 'buttons', where) & 0x7),
		)
	if cls is PointerUp:
		return PointerUp(screen_px=_point(obj, 'screen_px', where), button=_button(obj, where))
	return PointerCancel()


def decode_batch(obj):
	"""Decode {"events": [...]} (or a bare list) into a list of InputEvents."""
	if isinstance(obj, dict):
		if 'events' not in obj:
			raise BatchDecodeError("missing field 'events'")
		events = obj['events']
	else:
		events = obj
	if not isinstance(events, list):
		raise BatchDecodeError(f"'events' must be a list, got {type(events).__name__}")
	try:
		return [decode_event(item, f"events[{i}]") for i, item in enumerate(events)]
	except BatchDecodeError as e:
		logger.warning("Rejected input batch of %d event(s): %s", len(events), e)
		raise


def loads_batch(text):
	"""Decode a JSON string into a list of InputEvents."""
	try:
		obj = json.loads(text)
	except json.JSONDecodeError as e:
		raise BatchDecodeError(f"malformed JSON ({e})") from e
	return decode_batch(obj)


# ======================================================================
# Output
# ======================================================================

def encode_event(event):
	"""Inverse of decode_event, used by hosts that record input."""
	obj = {'type': event.TAG}
	if isinstance(event, CameraPanByScreenDelta):
		obj['delta_px'] = _encode_point(event.delta_px)
	elif isinstance(event, CameraZoomAtScreenPoint):
		obj['pivot_px'] = _encode_point(event.pivot_px)
		obj['zoom_multiplier'] = float(event.zoom_multiplier)
	elif isinstance(event, PointerDown):
		obj['screen_px'] = _encode_point(event.screen_px)
		obj['shift'] = bool(event.shift)
		obj['button'] = int(event.button)
	elif isinstance(event, PointerMove):
		obj['screen_px'] = _encode_point(event.screen_px)
		obj['buttons'] = int(event.buttons)
	elif isinstance(event, PointerUp):
		obj['screen_px'] = _encode_point(event.screen_px)
		obj['button'] = int(event.button)
	return obj


def _encode_point(p):
	return {'x': float(p.x), 'y': float(p.y)}


def _encode_rects(scene):
	return [
		{'pos': list(r.pos), 'size': list(r.size), 'color': list(r.color)}
		for r in scene.rects
	]


def encode_output(output):
	"""EngineOutput -> plain dict of floats and lists."""
	return {
		'camera': {
			'pan': _encode_point(output.camera.pan),
			'zoom': float(output.camera.zoom),
		},
		'render_scene': {'rects': _encode_rects(output.render_scene)},
		'overlay_scene': {'rects': _encode_rects(output.overlay_scene)},
	}


def dumps_output(output, indent=None):
	return json.dumps(encode_output(output), indent=indent)
