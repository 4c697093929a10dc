"""
In-memory record store for risks.

Risks live in a plain dictionary keyed by identifier for the lifetime
of the process; nothing is written to disk.  Every operation, reads
included, holds the store's lock for its whole duration, so no two
operations ever interleave.  No I/O happens while the lock is held.
"""

import threading
from typing import Dict, List, Optional, Tuple

from risk_registry_api.app.schemas.risk import RiskRead


class RiskStore:
    """Thread-safe mapping from risk identifier to ``RiskRead``."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._risks: Dict[str, RiskRead] = {}

    def insert(self, risk: RiskRead) -> None:
        """Add ``risk``, replacing any entry with the same ``id``."""
        with self._lock:
            self._risks[risk.id] = risk

    def list_all(self) -> List[RiskRead]:
        """Return a snapshot of every stored risk in no particular order."""
        with self._lock:
            return list(self._risks.values())

    def get_by_id(self, risk_id: str) -> Tuple[Optional[RiskRead], bool]:
        """Look up a risk.  Returns ``(risk, True)`` or ``(None, False)``."""
        with self._lock:
            risk = self._risks.get(risk_id)
        return risk, risk is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._risks)
