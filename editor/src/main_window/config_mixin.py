"""Configuration management for the main window"""

import json
import os

from constants import (
	CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_WINDOW_SIZE,
	FRAME_INTERVAL_MS, WHEEL_ZOOM_SENSITIVITY,
)
from utils.logger import loggerRaise

DEFAULT_CONFIG = {
	'wheel_zoom_sensitivity': WHEEL_ZOOM_SENSITIVITY,
	'frame_interval_ms': FRAME_INTERVAL_MS,
	'window_size': list(DEFAULT_WINDOW_SIZE),
	'selection_move': False,
}


def default_config_dir():
	return os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME)


def _coerce(key, value):
	"""Validate one config value against the type of its default. Raises ValueError."""
	default = DEFAULT_CONFIG[key]
	if isinstance(default, bool):
		if not isinstance(value, bool):
			raise ValueError(f"Config '{key}' must be true or false, got {value!r}")
		return value
	if isinstance(default, list):
		if (not isinstance(value, list) or len(value) != len(default)
				or not all(isinstance(v, int) and not isinstance(v, bool) and v > 0 for v in value)):
			raise ValueError(f"Config '{key}' must be a list of {len(default)} positive integers, got {value!r}")
		return list(value)
	if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
		raise ValueError(f"Config '{key}' must be a positive number, got {value!r}")
	return type(default)(value)


class ConfigMixin:
	"""Load/save user settings (JSON) for the main window.

	Expected state variables:
	- config_dir, config_file: str (set by init_config)
	- config: dict with every key of DEFAULT_CONFIG
	"""

	def init_config(self, config_dir=None):
		self.config_dir = config_dir or default_config_dir()
		self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
		self.config = dict(DEFAULT_CONFIG)

	def _load_config(self):
		"""Load settings from the config file. Missing file keeps defaults, unknown keys are ignored."""
		try:
			if os.path.exists(self.config_file):
				with open(self.config_file, 'r', encoding='utf-8') as f:
					stored = json.load(f)
				if not isinstance(stored, dict):
					raise ValueError(f"Config file must hold a JSON object: {self.config_file}")
				for key in DEFAULT_CONFIG:
					if key in stored:
						self.config[key] = _coerce(key, stored[key])
		except Exception as e:
			loggerRaise(e, "Error loading config")
		return self.config

	def _save_config(self):
		"""Save current settings to the config file"""
		try:
			os.makedirs(self.config_dir, exist_ok=True)
			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(self.config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")
