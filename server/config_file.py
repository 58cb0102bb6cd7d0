"""File-based configuration for the sutja server."""

import json
import logging
import os

from core.config import AUTO_ADVANCE_DELAY_SECONDS
from core.models import QuizSettings

logger = logging.getLogger(__name__)


class ConfigFile:
    """Optional JSON config holding the defaults for new quiz sessions.

    Example ~/.config/sutja/config.json:

        {"defaults": {"number_system": "sino", "direction": "english_to_korean",
                      "min_range": 0, "max_range": 100},
         "auto_advance_delay": 1.5}
    """

    def __init__(self, config_file: str = None):
        self.config_file = config_file or os.environ.get('SUTJA_CONFIG') \
            or os.path.expanduser('~/.config/sutja/config.json')

    def load_config(self) -> dict:
        """Load configuration. Missing or unreadable files give an empty config."""
        if not os.path.exists(self.config_file):
            return {}
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring config file {self.config_file}: {e}")
            return {}
        if not isinstance(config, dict):
            logger.warning(f"Ignoring config file {self.config_file}: expected a JSON object")
            return {}
        return config

    def default_settings(self, config: dict = None) -> QuizSettings:
        """Settings for a new session, falling back to built-in defaults on bad values."""
        if config is None:
            config = self.load_config()
        defaults = config.get('defaults') or {}
        try:
            return QuizSettings.from_dict(defaults)
        except ValueError as e:
            logger.warning(f"Invalid default settings in {self.config_file}: {e}")
            return QuizSettings()

    def advance_delay(self, config: dict = None) -> float:
        """Seconds to wait before moving on after a correct answer."""
        if config is None:
            config = self.load_config()
        value = config.get('auto_advance_delay', AUTO_ADVANCE_DELAY_SECONDS)
        try:
            delay = float(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid auto_advance_delay {value!r}, using {AUTO_ADVANCE_DELAY_SECONDS}")
            return AUTO_ADVANCE_DELAY_SECONDS
        return max(0.0, delay)
