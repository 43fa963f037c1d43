"""
Audit Logger — One JSON line per scan.

Each line is a serialized AuditEntry stamped with the UTC time it was
written. Reading back yields AuditEntry objects; lines that no longer
validate are skipped.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from pathlib import Path

from pydantic import ValidationError

from keysafe.config import settings
from keysafe.models.scan_models import AuditEntry

logger = logging.getLogger("keysafe.audit")


class AuditLogger:
    """Appends scan audit entries to a JSON-lines file."""

    def __init__(self, log_path: str | None = None, enabled: bool | None = None) -> None:
        self.log_path = Path(log_path or settings.audit_log_path)
        self.enabled = settings.audit_enabled if enabled is None else enabled

    def log(self, entry: AuditEntry) -> AuditEntry:
        """Stamp and append an entry. Write failures are logged, not raised."""
        stamped = entry.model_copy(
            update={"timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())}
        )
        if not self.enabled:
            return stamped

        try:
            with self.log_path.open("a", encoding="utf-8") as f:
                f.write(stamped.model_dump_json() + "\n")
        except OSError as e:
            logger.error(f"Failed to write audit log {self.log_path}: {e}")
        return stamped

    def read_recent(self, count: int = 50) -> list[AuditEntry]:
        """The last `count` valid entries, oldest first."""
        if not self.log_path.exists():
            return []

        recent: deque[AuditEntry] = deque(maxlen=count)
        with self.log_path.open(encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    recent.append(AuditEntry.model_validate_json(line))
                except ValidationError:
                    logger.warning(f"Skipping unreadable audit line in {self.log_path}")
        return list(recent)
