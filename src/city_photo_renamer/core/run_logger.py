from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

@dataclass
class RunLogger:
    """Append-only text log for rename batches.

    Lines look like: [2026-01-01 10:00:00] INFO batch-1: Parsed 13 records.
    """
    path: Path
    batch_label: str = "batch"

    def log(self, message: str, level: str = "INFO") -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.path.open("a", encoding="utf-8") as f:
            f.write(f"[{stamp}] {level} {self.batch_label}: {message}\n")

    def error(self, message: str) -> None:
        self.log(message, level="ERROR")

    def read_lines(self) -> list[str]:
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()
