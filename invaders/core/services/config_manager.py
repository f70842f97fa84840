"""
config_manager.py
-----------------
Loader for the data files shipped in invaders/config.

Features:
- Supports .json and .yaml files
- Builds a file index once for O(1) lookups by filename
- Recursively merges loaded data over defaults
- Ignores '_notes' keys so config files can carry comments
"""

import json
import os

import yaml

from invaders.core.debug.debug_logger import DebugLogger
from invaders.core.errors import AssetLoadError


# ===========================================================
# Configuration
# ===========================================================

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_ROOT = os.path.join(PACKAGE_ROOT, "config")

SEARCH_DIRS = [DATA_ROOT]

_SUFFIXES = (".json", ".yaml", ".yml")
_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename (looked up in the index) or full path
        default_dict: Defaults the loaded data is merged over
        strict: Raise AssetLoadError instead of falling back to defaults

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    if os.path.isabs(filename) and os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        if path.endswith((".yaml", ".yml")):
            data = _load_yaml(path)
        else:
            data = _load_json(path)
    except (json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        if strict:
            raise AssetLoadError(path, str(e)) from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return dict(default_dict)

    if not isinstance(data, dict):
        if strict:
            raise AssetLoadError(path, "top level must be a mapping")
        DebugLogger.warn(f"{path} is not a mapping - using defaults", category="loading")
        return dict(default_dict)

    return _merge_dicts(default_dict, data)


def build_file_index():
    """Scan the config directories and cache every data file path."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for file in files:
                if file.endswith(_SUFFIXES) and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")
    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    for ext in _SUFFIXES:
        if filename + ext in _FILE_INDEX:
            return _FILE_INDEX[filename + ext]

    # Not indexed: let the loader raise on the raw path
    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = default.copy()
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
