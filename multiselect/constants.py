"""Project-wide constants for the multiselect package."""

DEFAULT_ANCHOR_HISTORY_LIMIT = 256
"""Anchors kept by the Qt selection model; only the newest one is ever read"""

CONFIG_FILENAME = ".multiselect_config.json"
"""Settings file name, placed in the user's home directory"""

CONFIG_ENV_VAR = "MULTISELECT_CONFIG"
"""Environment variable overriding the settings file location"""
