"""Timestamped, settings-gated flow logging for layout diagnostics."""

import time

from axogrid.utils.settings import settings, DEFAULT_SETTINGS

_ALWAYS_SHOWN_LEVELS = ('WARNING', 'ERROR')
_last_emit: dict[str, float] = {}


def trace_enabled() -> bool:
    try:
        return bool(settings.value(
            'layout_trace_logs',
            defaultValue=DEFAULT_SETTINGS['layout_trace_logs'], type=bool))
    except Exception:
        return False


def log_flow(component: str, message: str, *, level: str = "DEBUG",
             throttle_key: str | None = None, every_s: float | None = None):
    """Print one `[ts][TRACE][COMPONENT][LEVEL]` line.

    DEBUG/INFO lines are dropped unless `layout_trace_logs` is enabled.
    WARNING and ERROR lines are always printed.
    """
    level = level.upper()
    if level not in _ALWAYS_SHOWN_LEVELS and not trace_enabled():
        return

    now = time.time()
    if throttle_key and every_s is not None:
        last = _last_emit.get(throttle_key, 0.0)
        if (now - last) < every_s:
            return
        _last_emit[throttle_key] = now
    ts = time.strftime("%H:%M:%S", time.localtime(now)) + f".{int((now % 1) * 1000):03d}"
    print(f"[{ts}][TRACE][{component}][{level}] {message}")
