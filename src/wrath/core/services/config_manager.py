"""
config_manager.py
-----------------
Reads gameplay override files and layers them over built-in defaults.

- YAML (.yaml/.yml) and JSON (.json) are both accepted
- Relative names are looked up in the working directory, then in the
  config directory shipped inside the package
- Nested sections merge key by key; '_notes' entries are documentation only
- A missing or broken file never stops the game unless strict=True
"""

import json
import os

import yaml

from wrath.core.debug.debug_logger import DebugLogger


PACKAGE_CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [".", PACKAGE_CONFIG_DIR]

NOTES_KEY = "_notes"


# ===========================================================
# Readers
# ===========================================================

def _read_yaml(stream):
    # An empty YAML document parses to None
    return yaml.safe_load(stream) or {}


READERS = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": json.load,
}

READ_ERRORS = (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError)


def read_config_file(path):
    """
    Parse one config file into a mapping.

    Raises:
        ValueError: unsupported extension, bad JSON, or a non-mapping document
        yaml.YAMLError: malformed YAML
        OSError: the file cannot be opened
    """
    suffix = os.path.splitext(path)[1].lower()
    reader = READERS.get(suffix)
    if reader is None:
        raise ValueError(f"unsupported config format '{suffix}'")

    with open(path, "r", encoding="utf-8") as stream:
        data = reader(stream)

    if not isinstance(data, dict):
        raise ValueError(f"{os.path.basename(path)} must contain a mapping at the top level")

    DebugLogger.system(f"Read {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Lookup & Merge
# ===========================================================

def resolve_path(filename, search_dirs=None):
    """First existing location of filename, or None."""
    if os.path.isabs(filename):
        return filename if os.path.isfile(filename) else None

    for directory in SEARCH_DIRS if search_dirs is None else search_dirs:
        candidate = os.path.join(directory, filename)
        if os.path.isfile(candidate):
            return candidate
    return None


def merge_config(base, overrides):
    """Return base updated with overrides, descending into nested sections."""
    result = dict(base)
    for key, value in overrides.items():
        if key == NOTES_KEY:
            continue
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = merge_config(current, value)
        else:
            result[key] = value
    return result


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False, search_dirs=None):
    """
    Load filename and merge it over default_dict.

    Args:
        filename: Bare name (searched for) or absolute path
        default_dict: Values used for anything the file does not set
        strict: Raise FileNotFoundError instead of falling back to defaults
        search_dirs: Directories to search instead of SEARCH_DIRS

    Returns:
        dict: The merged configuration (a new dict, defaults are not mutated)
    """
    defaults = default_dict or {}
    path = resolve_path(filename, search_dirs)

    if path is None:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}")
        DebugLogger.trace(f"{filename} not present, keeping defaults", category="loading")
        return dict(defaults)

    try:
        overrides = read_config_file(path)
    except READ_ERRORS as e:
        if strict:
            raise FileNotFoundError(f"Config not readable: {path}") from e
        DebugLogger.warn(f"Ignoring {path}: {e}", category="loading")
        return dict(defaults)

    return merge_config(defaults, overrides)
