import time
from datetime import datetime, timezone

# Captured once at import; read-only afterwards.
PROCESS_STARTED_AT = time.monotonic()


def now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def uptime_seconds() -> float:
    """Seconds since ``hello_api`` was imported.

    The clock starts at package import rather than at interpreter launch, so
    it trails true process uptime by the few milliseconds the imports take.
    """
    return max(0.0, time.monotonic() - PROCESS_STARTED_AT)
