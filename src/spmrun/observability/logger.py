"""Per-invocation JSONL ledger for run tool decisions."""

from __future__ import annotations

import json
import os
import tempfile
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Optional


class InvocationLogger:
    """Append-only event log plus summary for one run invocation.

    Files live under ``<base_dir>/<run_id>/``. The summary must be written
    before exec since control never returns on success.
    """

    def __init__(
        self,
        base_dir: Path,
        run_id: Optional[str] = None,
        *,
        tool_name: Optional[str] = None,
    ):
        self.run_id = run_id or f"run-{uuid.uuid4().hex[:16]}"
        self.tool_name = tool_name
        self.base_dir = base_dir
        self.run_dir = self.base_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=True)
        self.logs: list[dict[str, Any]] = []
        self.started_at = time.time()

    def _atomic_write(self, path: Path, payload: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", delete=False, dir=path.parent, encoding="utf-8"
        ) as tmp:
            tmp.write(payload)
            tmp_path = Path(tmp.name)
        os.replace(tmp_path, path)

    def _write_json(self, path: Path, content: Any) -> None:
        payload = json.dumps(content, ensure_ascii=False, indent=2)
        self._atomic_write(path, payload + "\n")

    def log(self, event: str, data: Dict[str, Any]) -> None:
        """Append an event to logs.jsonl."""
        entry = {
            "run_id": self.run_id,
            "event": event,
            "timestamp": time.time(),
            "data": data,
        }
        self.logs.append(entry)
        log_file = self.run_dir / "logs.jsonl"
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, ensure_ascii=False, default=str) + "\n")

    def finalize(self, outcome: str, **details: Any) -> None:
        """Write summary.json, replacing any earlier summary."""
        summary: dict[str, Any] = {
            "run_id": self.run_id,
            "outcome": outcome,
            "total_logs": len(self.logs),
            "events": [entry["event"] for entry in self.logs],
            "run_dir": str(self.run_dir),
            "duration_ms": (time.time() - self.started_at) * 1000,
        }
        if self.tool_name:
            summary["tool"] = self.tool_name
        summary.update({key: str(value) for key, value in details.items() if value is not None})
        self._write_json(self.run_dir / "summary.json", summary)


__all__ = ["InvocationLogger"]
