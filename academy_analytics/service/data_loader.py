"""
Dataset Loader

Reads academy snapshots from JSON or YAML files and validates them into a
Dataset. This is the boundary where loosely shaped records become typed
entities; everything past it can rely on the model invariants.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from academy_analytics.models.dataset import Dataset

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


class DatasetLoader:
    """
    Loads and validates dataset snapshots.

    Usage:
        dataset = DatasetLoader().load("data/academy_snapshot.json")
    """

    def load(self, path: str | Path) -> Dataset:
        """
        Load a snapshot file.

        Args:
            path: JSON or YAML file with one list per entity collection

        Returns:
            Validated Dataset

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file extension is not supported
            pydantic.ValidationError: If the records break model invariants
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Snapshot file not found: {path}")

        suffix = path.suffix.lower()
        with open(path) as f:
            if suffix in JSON_SUFFIXES:
                raw = json.load(f)
            elif suffix in YAML_SUFFIXES:
                raw = yaml.safe_load(f)
            else:
                raise ValueError(f"Unsupported snapshot format: {path.suffix}")

        dataset = self.from_records(raw or {})
        logger.info(f"Loaded snapshot from {path}")
        return dataset

    def from_records(self, records: dict[str, Any]) -> Dataset:
        """Validate an in-memory mapping of entity collections."""
        dataset = Dataset.model_validate(records)
        logger.debug(
            f"Snapshot: {len(dataset.players)} players, {len(dataset.sessions)} sessions, "
            f"{len(dataset.attendance)} attendance records, {len(dataset.matches)} matches, "
            f"{len(dataset.wellness)} wellness entries"
        )
        return dataset
