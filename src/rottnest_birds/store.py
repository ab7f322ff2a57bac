"""Tiered data store for pipeline tables.

Manages read/write of data files organized into tiers by pipeline stage:
  - raw/: Survey exports as delivered (surveys.csv, sightings.csv)
  - intermediate/: Extractor output, overwritten on every extract run
  - derived/: Analyzer outputs, always recomputed (summary tables, run summaries)

CSV tables are read and written as text so values round-trip byte-for-byte.
Each written table gets a sidecar ``.meta.json`` with its source and row
count; the CSV itself carries no run-specific content, so rewriting the same
frame produces an identical file.

JSON payloads (run summaries) are wrapped in a metadata envelope instead.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003: used at runtime, not just annotations
from typing import Any

import pandas as pd


class DataStore:
    """Manages read/write of pipeline data files."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.raw = base_dir / "raw"
        self.intermediate = base_dir / "intermediate"
        self.derived = base_dir / "derived"

    def read_table(self, path: Path) -> pd.DataFrame | None:
        """Read a CSV table with every column as text.

        Empty cells stay empty strings rather than becoming NaN.
        Returns None if the file doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        return pd.read_csv(full, dtype=str, keep_default_na=False)

    def write_table(self, path: Path, frame: pd.DataFrame, source: str, **params: Any) -> Path:
        """Write a table as CSV, replacing any previous file in one step.

        The frame is written to a temporary sibling first and then renamed
        over the destination, so a failure never leaves a half-written table.

        Args:
            path: Relative path under base_dir (e.g. ``derived/tables/x.csv``).
            frame: Table to write. The index is not written.
            source: Producer identifier (e.g. ``"extract-observations"``).
            **params: Extra metadata fields for the sidecar.

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        tmp = full.with_suffix(full.suffix + ".tmp")
        try:
            frame.to_csv(tmp, index=False, lineterminator="\n")
            tmp.replace(full)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise

        meta: dict[str, Any] = {
            "source": source,
            "written_at": datetime.now(UTC).isoformat(),
            "rows": len(frame),
            "columns": [str(c) for c in frame.columns],
        }
        if params:
            meta.update(params)

        meta_path = full.with_suffix(full.suffix + ".meta.json")
        with meta_path.open("w") as f:
            json.dump({"meta": meta}, f, indent=2, default=str)

        return full

    def read(self, path: Path) -> dict[str, Any] | None:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope.get("data", envelope)

    def write(self, path: Path, data: Any, source: str, **params: Any) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``derived/summary.json``).
            data: Payload to store under the ``data`` key.
            source: Producer identifier.
            **params: Extra metadata fields.

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "written_at": datetime.now(UTC).isoformat(),
        }
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2, default=str)

        return full

    def read_meta(self, path: Path) -> dict[str, Any]:
        """Read the sidecar metadata of a stored table (empty if none)."""
        full = self._resolve(path)
        sidecar = full.with_suffix(full.suffix + ".meta.json")
        if not sidecar.exists():
            return {}
        with sidecar.open() as f:
            result: dict[str, Any] = json.load(f)
        return result.get("meta", {})

    def file_path(self, path: Path) -> Path | None:
        """Return the absolute path of a stored file, or None if missing."""
        full = self._resolve(path)
        return full if full.exists() else None

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
