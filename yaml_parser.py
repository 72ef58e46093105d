# yaml_parser.py
import json
import logging
import re
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


# Free-text fields whose nested keys are story content (character names,
# motif labels) rather than schema keys.
FREE_TEXT_KEYS: frozenset[str] = frozenset(
    {
        "arc",
        "relationships",
        "motivation",
        "internal_conflict",
        "voice",
        "callbacks",
        "foreshadowing",
        "recurring_motifs",
    }
)


def normalize_key(key: Any) -> str:
    """``"Series Title"``, ``"seriesTitle"`` and ``"series-title"`` -> ``"series_title"``."""
    text = _CAMEL_BOUNDARY_RE.sub("_", str(key).strip())
    return re.sub(r"[\s\-]+", "_", text).lower()


def normalize_keys_recursive(
    data: Any, preserve: frozenset[str] = FREE_TEXT_KEYS
) -> Any:
    """
    Recursively normalizes dictionary keys to snake_case so hand-written YAML
    ("Series Title") and client JSON ("seriesTitle") read the same way.
    Values under a key in ``preserve`` are returned untouched.
    """
    if isinstance(data, dict):
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            new_key = normalize_key(key)
            normalized[new_key] = (
                value
                if new_key in preserve
                else normalize_keys_recursive(value, preserve)
            )
        return normalized
    if isinstance(data, list):
        return [normalize_keys_recursive(item, preserve) for item in data]
    return data


def load_story_file(filepath: str, normalize_keys: bool = True) -> dict[str, Any] | None:
    """
    Loads an episode or story bible from a YAML or JSON file.

    Args:
        filepath: Path to a ``.yaml``, ``.yml`` or ``.json`` file.
        normalize_keys: Whether to recursively convert dictionary keys to
                        snake_case. Defaults to True.

    Returns:
        A dictionary with the file content, ``{}`` for an empty file, or None
        if the file is missing, unreadable or not a mapping at the root.
    """
    if not filepath.endswith((".yaml", ".yml", ".json")):
        logger.error(f"File specified is not a YAML or JSON file: {filepath}")
        return None
    try:
        with open(filepath, encoding="utf-8") as f:
            if filepath.endswith(".json"):
                raw = f.read()
                content = json.loads(raw) if raw.strip() else None
            else:
                content = yaml.safe_load(f)

        if content is None:  # Empty file
            return {}
        if not isinstance(content, dict):
            logger.error(
                f"Story file {filepath} must have a mapping as its root element. Parsed type: {type(content)}"
            )
            return None

        if normalize_keys:
            return normalize_keys_recursive(content)
        return content
    except FileNotFoundError:
        logger.warning(f"Story file '{filepath}' not found.")
        return None
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        logger.error(f"Error parsing story file {filepath}: {e}", exc_info=True)
        return None
