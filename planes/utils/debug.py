from datetime import datetime

from planes.domain import config

# -----------------------------
# Debug helpers (enable with --debug or env PLANES_DEBUG=1)
# -----------------------------
DEBUG_ENABLED = config.DEBUG_ENABLED
DEBUG_LOG_PATH = config.DEBUG_LOG_PATH


def _debug_log_line(line: str) -> None:
    try:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(DEBUG_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(f"[{ts}] {line}\n")
    except OSError:
        pass


def debug_event(
    title: str,
    message: str,
    details: str = "",
    *,
    level: str = "info",
) -> None:
    """Log a debug event. Errors are always written, everything else only when debugging."""
    if not (DEBUG_ENABLED or level == "error"):
        return

    _debug_log_line(f"{level.upper()} | {title} | {message}")
    if details:
        for ln in details.splitlines():
            _debug_log_line(f"    {ln}")
