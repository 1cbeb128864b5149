# src/taskpanel/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .task_models import SchemaError, StoredData, now_ms, parse_current, parse_legacy

logger = logging.getLogger(__name__)


def dump_document(data: StoredData) -> str:
    """Serialize a document the way it is written to disk (2-space indent, no trailing newline)."""
    return json.dumps(data.to_dict(), ensure_ascii=False, indent=2)


class TaskStore:
    """
    JSON file task store.

    The file holds one StoredData document. Reading is forgiving:
    - current schema is used as-is
    - legacy schema ({"tasks": [{"title", "done"}]}) is migrated in memory
    - missing / unreadable / unparsable file -> empty document

    Writing is not: storage errors propagate to the caller.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self, now_ts: int | None = None) -> StoredData:
        if now_ts is None:
            now_ts = now_ms()

        if not self._path.exists():
            logger.info("No task file at %s; starting with an empty document.", self._path)
            return StoredData.empty()

        try:
            raw = json.loads(self._path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, ValueError):
            logger.warning("Task file %s is unreadable; using an empty document.", self._path, exc_info=True)
            return StoredData.empty()

        try:
            data = parse_current(raw, now_ts)
            logger.debug(
                "Loaded %s tasks=%d checklist=%d", self._path, len(data.tasks), len(data.checklist)
            )
            return data
        except SchemaError as current_err:
            try:
                data = parse_legacy(raw, now_ts)
            except SchemaError as legacy_err:
                logger.warning(
                    "Task file %s matches no known schema (%s; %s); using an empty document.",
                    self._path,
                    current_err,
                    legacy_err,
                )
                return StoredData.empty()

        logger.info("TaskStore migration: legacy document %s -> %d tasks", self._path, len(data.tasks))
        return data

    def save(self, data: StoredData) -> None:
        """Overwrite the backing file with `data`. Raises OSError on storage failure."""
        payload = dump_document(data)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Failed to save tasks to %s", self._path)
            raise
        logger.debug(
            "Saved %s tasks=%d checklist=%d", self._path, len(data.tasks), len(data.checklist)
        )
