"""JSON file store for schedule entries and reminder settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .errors import StoreError
from .schemas import StoreState

logger = logging.getLogger(__name__)


class JsonStore:
    """Whole-file JSON store. Every read and write touches the full document."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def initialize(self) -> None:
        """Create the parent directory and an initial document if none exists."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self._write(StoreState())
            logger.info(f"Initialized schedule store at {self.path}")

    def read(self) -> StoreState:
        """Parse the store file, raising StoreError on any failure."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"cannot read {self.path}: {exc}") from exc

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StoreError(f"malformed JSON in {self.path}") from exc

        if not isinstance(payload, dict):
            raise StoreError("store payload must be an object")

        try:
            return StoreState.model_validate(payload)
        except ValidationError as exc:
            raise StoreError(f"invalid store content: {exc.error_count()} error(s)") from exc

    def load(self) -> StoreState:
        """Load the current state. Failures degrade to an empty state."""
        if not self.path.exists():
            try:
                self.initialize()
            except OSError as exc:
                logger.error(f"Error initializing store: {exc}")
                return StoreState()

        try:
            return self.read()
        except StoreError as exc:
            logger.error(f"Error loading data: {exc}")
            return StoreState()

    def save(self, state: StoreState) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write(state)
            return True
        except OSError as exc:
            logger.error(f"Error saving data: {exc}")
            return False

    def reset(self) -> bool:
        return self.save(StoreState())

    def is_reachable(self) -> bool:
        try:
            self.read()
            return True
        except StoreError:
            return False

    def _write(self, state: StoreState) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(state.to_json(), encoding="utf-8")
        tmp_path.replace(self.path)
