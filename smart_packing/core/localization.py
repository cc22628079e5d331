"""Localization resolver mapping catalog name keys to display strings."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

NameResolver = Callable[[str], str]

LOCALES_DIR = Path(__file__).resolve().parent.parent / "data" / "locales"
DEFAULT_LANGUAGE = "en"
_KEY_PREFIXES = ("item_",)


def humanize_key(name_key: str) -> str:
    """``item_phone_charger`` -> ``Phone charger``."""
    text = name_key
    for prefix in _KEY_PREFIXES:
        if text.startswith(prefix):
            text = text[len(prefix):]
            break
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:] if text else name_key


def _read_table(path: Path) -> Dict[str, str]:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Locale file {path} must contain a JSON object")
    return {str(key): str(value) for key, value in data.items()}


class Localizer:
    """Callable resolver backed by a ``<language>.json`` translation table.

    Unknown languages fall back to English; unknown keys fall back to a
    humanised form of the key so output never shows raw identifiers.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE, *, locales_dir: Optional[Path] = None):
        self.locales_dir = Path(locales_dir) if locales_dir else LOCALES_DIR
        self.language = language
        self._table = self._load(language)

    def _load(self, language: str) -> Dict[str, str]:
        root = self.locales_dir.resolve()
        for candidate in dict.fromkeys((language, DEFAULT_LANGUAGE)):
            path = self.locales_dir / f"{candidate}.json"
            if not path.resolve().is_relative_to(root):
                logger.warning("Ignoring locale '%s' outside %s", candidate, self.locales_dir)
                continue
            try:
                table = _read_table(path)
            except FileNotFoundError:
                logger.warning("No locale file for '%s' in %s", candidate, self.locales_dir)
                continue
            except (OSError, ValueError) as exc:
                logger.error("Failed to read locale file %s: %s", path, exc)
                continue
            if candidate != language:
                logger.info("Falling back to '%s' translations for '%s'", candidate, language)
            self.language = candidate
            return table
        return {}

    def __call__(self, name_key: str) -> str:
        return self._table.get(name_key) or humanize_key(name_key)
