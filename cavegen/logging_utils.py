"""Run-level event lines for cave generation.

One line per event, key=value pairs or a JSON object, tagged with level,
timestamp and logger name. Module internals log detail through stdlib
``logging``; this is only for the events a CLI user greps for.

Environment (read on every call):
    CAVEGEN_LOG_LEVEL  debug|info|warn|error (default info)
    CAVEGEN_LOG_JSON   1/true/yes/on for JSON lines
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _enabled(level: str) -> bool:
    threshold = LEVELS.get(os.getenv("CAVEGEN_LOG_LEVEL", "info").lower(), LEVELS["info"])
    return LEVELS[level] >= threshold


def _render(record: dict) -> str:
    if os.getenv("CAVEGEN_LOG_JSON", "0").lower() in ("1", "true", "yes", "on"):
        return json.dumps(record, separators=(",", ":"), default=str)
    return " ".join(f"{k}={str(v).replace(' ', '_')}" for k, v in record.items())


class EventLog:
    def __init__(self, name: str):
        self.name = name

    def _emit(self, level: str, stream, fields: dict):
        if not _enabled(level):
            return
        record = {"level": level, "ts": int(time.time()), "logger": self.name}
        record.update((k, v) for k, v in fields.items() if v is not None)
        print(_render(record), file=stream)

    def debug(self, **fields):
        self._emit("debug", sys.stdout, fields)

    def error(self, **fields):
        self._emit("error", sys.stderr, fields)


_LOGGERS: dict[str, EventLog] = {}


def get_logger(name: str) -> EventLog:
    return _LOGGERS.setdefault(name, EventLog(name))


log = get_logger("cavegen")
