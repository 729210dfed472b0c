import json
import logging
import os

from .config import EditorConfig

logger = logging.getLogger(__name__)

# We define the file name here
CONFIG_FILE = "config.json"


def default_config_path():
    base_path = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(base_path, CONFIG_FILE)


def load_config(path=None):
    """Read the JSON settings file. Returns None if it can't be used."""
    config_path = path or default_config_path()
    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            return json.load(file)

    except FileNotFoundError:
        logger.error("❌ %s not found!", config_path)
        return None
    except json.JSONDecodeError as e:
        logger.error("❌ JSON error in %s: %s", config_path, e)
        return None


def editor_config_from(data) -> EditorConfig:
    """Build an EditorConfig from the 'editor' section; missing keys keep their defaults"""
    section = (data or {}).get('editor', {})
    known = EditorConfig.__dataclass_fields__
    unknown = sorted(set(section) - set(known))
    if unknown:
        logger.warning("⚠️ Ignoring unknown editor settings: %s", ", ".join(unknown))
    return EditorConfig(**{key: value for key, value in section.items() if key in known})
