"""
config_manager.py
-----------------
Configuration loader for game config files.

Features:
- Supports .json, .yaml and .yml config files
- Builds file index once for O(1) lookups by bare filename
- Recursively merges over defaults
- Ignores '_notes' keys for human-readable configs
"""

import json
import os

import yaml

from dodger.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

SEARCH_DIRS = [
    ".",
    "config",
]

CONFIG_EXTENSIONS = (".json", ".yaml", ".yml")

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename or path (.json, .yaml or .yml)
        default_dict: Default fallback config
        strict: If True, raise on missing or unreadable file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    if os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        if path.endswith((".yaml", ".yml")):
            data = _load_yaml(path)
        else:
            data = _load_json(path)

        if not isinstance(data, dict):
            raise ValueError(f"top-level value in {path} is not a mapping")

        return _merge_dicts(default_dict, data)

    except (json.JSONDecodeError, yaml.YAMLError, ValueError, OSError) as e:
        if strict:
            raise FileNotFoundError(f"Config not loadable: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def build_file_index():
    """Scan config directories and cache all file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for file in files:
                if file.endswith(CONFIG_EXTENSIONS) and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """Lookup from the pre-built index."""
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")

    if filename in _FILE_INDEX:
        return _FILE_INDEX[filename]

    for ext in CONFIG_EXTENSIONS:
        key = filename + ext
        if key in _FILE_INDEX:
            return _FILE_INDEX[key]

    # Missing file; the loader reports it
    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_yaml(path):
    """Load YAML config file. An empty file reads as an empty mapping."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)} (YAML)", category="loading")
    return data if data is not None else {}


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts into a new dict. Ignores '_notes' keys."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
