from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from ..exceptions import CatalogueError
from .category import ItemCategory

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE = "catalogue.yaml"


@dataclass
class Catalogue:
    """Closed mapping of item names to categories.

    Exact, case-sensitive name equality is checked first. Prefix rules
    (``str.startswith``) are only consulted when no exact name matched, in the
    order they were declared. Anything else is :attr:`ItemCategory.ORDINARY`.
    """

    names: Dict[str, ItemCategory] = field(default_factory=dict)
    prefixes: List[Tuple[str, ItemCategory]] = field(default_factory=list)

    def classify(self, name: str) -> ItemCategory:
        category = self.names.get(name)
        if category is not None:
            return category
        for prefix, prefix_category in self.prefixes:
            if name.startswith(prefix):
                return prefix_category
        return ItemCategory.ORDINARY

    def register(self, name: str, category: ItemCategory) -> None:
        self.names[name] = category

    def add_prefix(self, prefix: str, category: ItemCategory) -> None:
        if not prefix:
            raise CatalogueError("Prefix rules need a non-empty prefix")
        self.prefixes.append((prefix, category))

    @classmethod
    def from_dict(cls, data: dict) -> "Catalogue":
        catalogue = cls()
        catalogue.merge(data)
        return catalogue

    def merge(self, data: dict) -> None:
        """Overlay a parsed catalogue document onto this one.

        Name lists are unioned per category (a name listed again moves to the
        new category); prefix rules are appended after the existing ones.
        """
        names = data.get("names") or {}
        if not isinstance(names, dict):
            raise CatalogueError(f"'names' must be a mapping of category to names, got {type(names).__name__}")
        for key, listed in names.items():
            category = _parse_category(key)
            if isinstance(listed, str):
                listed = [listed]
            if not isinstance(listed, list):
                raise CatalogueError(f"Names for category '{key}' must be a list")
            for name in listed:
                self.register(str(name), category)

        prefixes = data.get("prefixes") or []
        if not isinstance(prefixes, list):
            raise CatalogueError("'prefixes' must be a list of {prefix, category} entries")
        for entry in prefixes:
            if not isinstance(entry, dict) or "prefix" not in entry or "category" not in entry:
                raise CatalogueError(f"Invalid prefix rule: {entry!r}")
            self.add_prefix(str(entry["prefix"]), _parse_category(entry["category"]))


def _parse_category(value) -> ItemCategory:
    try:
        return ItemCategory(str(value).lower())
    except ValueError as exc:
        known = ", ".join(c.value for c in ItemCategory)
        raise CatalogueError(f"Unknown item category '{value}' (expected one of: {known})") from exc


def _load_yaml(path: Path) -> dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise CatalogueError(f"Catalogue file {path} is not valid YAML: {exc}") from exc


def load_catalogue(user_path: Optional[Path] = None) -> Catalogue:
    """Load the packaged default catalogue and overlay an optional user file.

    A user path that does not exist is logged and ignored.
    """
    try:
        with resources.files("gilded_rose.data").joinpath(DEFAULT_RESOURCE).open("r", encoding="utf-8") as f:
            default_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise CatalogueError(f"Packaged catalogue {DEFAULT_RESOURCE} is not valid YAML: {exc}") from exc
    catalogue = Catalogue.from_dict(default_data)
    logger.debug("Loaded default catalogue: %d names, %d prefix rules", len(catalogue.names), len(catalogue.prefixes))

    if user_path is not None:
        if user_path.exists():
            user_data = _load_yaml(user_path)
            if not isinstance(user_data, dict):
                raise CatalogueError(f"Catalogue file {user_path} must contain a mapping")
            catalogue.merge(user_data)
            logger.info("Loaded user catalogue from %s", user_path)
        else:
            logger.warning("Catalogue file not found: %s; using defaults", user_path)
    return catalogue


# A default, module-level catalogue for convenience
DEFAULT_CATALOGUE = load_catalogue()


def classify(name: str) -> ItemCategory:
    """Classify ``name`` against the default catalogue."""
    return DEFAULT_CATALOGUE.classify(name)
