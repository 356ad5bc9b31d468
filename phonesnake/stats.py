"""
stats.py — Persistent player statistics.

Keeps the best score and a per-day attempt counter in a small key-value
store.  The record lives under a single key as a JSON object:

    {"bestScore": 12, "attemptsByDay": {"2026-10-18": 3}}

Reading is fallible: decode_stats() raises StatsDecodeError on anything it
cannot make sense of and StatsStore.load() falls back to empty stats.
Writing is best effort; a failed save is logged and otherwise ignored so
the game keeps running on read-only or full disks.
"""

import datetime
import json
import logging
import math
import os

from .config import STATS_KEY, STATS_PATH

log = logging.getLogger(__name__)


class StatsDecodeError(ValueError):
    """The stored stats record is not a usable JSON object."""


def date_key(day: datetime.date | None = None) -> str:
    """Local calendar date as YYYY-MM-DD."""
    day = day or datetime.date.today()
    return day.isoformat()


# ───────────────────────────── Stats ─────────────────────────────
class Stats:
    def __init__(self, best_score: int = 0, attempts_by_day: dict[str, int] | None = None):
        self.best_score = best_score
        self.attempts_by_day: dict[str, int] = dict(attempts_by_day or {})

    def to_json(self) -> str:
        return json.dumps({"bestScore": self.best_score, "attemptsByDay": self.attempts_by_day})

    def __eq__(self, other):
        return (isinstance(other, Stats)
                and self.best_score == other.best_score
                and self.attempts_by_day == other.attempts_by_day)

    def __repr__(self):
        return f"Stats(best_score={self.best_score}, attempts_by_day={self.attempts_by_day})"


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def decode_stats(raw: str | None) -> Stats:
    """
    Parse a stored record.  A missing record is simply empty stats; a
    record that is not a JSON object raises StatsDecodeError.  Fields of
    the wrong type are reset individually.
    """
    if not raw:
        return Stats()
    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise StatsDecodeError(f"stats record is not JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise StatsDecodeError(f"stats record is {type(parsed).__name__}, expected object")

    best = parsed.get("bestScore")
    attempts = parsed.get("attemptsByDay")
    if not isinstance(attempts, dict):
        attempts = {}
    return Stats(
        best_score=int(best) if _is_number(best) else 0,
        attempts_by_day={str(k): int(v) for k, v in attempts.items() if _is_number(v)},
    )


# ─────────────────────────── Backends ────────────────────────────
class MemoryBackend:
    """In-process key-value store."""

    def __init__(self, data: dict[str, str] | None = None):
        self.data = dict(data or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileBackend:
    """
    Key-value store kept in one JSON file, {key: string value}.
    Read errors propagate as OSError / ValueError; callers decide.
    """

    def __init__(self, path: str = STATS_PATH):
        self.path = path

    def _read_all(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except (ValueError, RecursionError):
            data = {}
        data[key] = value
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        tmp = self.path + ".tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError):
            if os.path.exists(tmp):
                os.remove(tmp)
            raise


# ────────────────────────── StatsStore ───────────────────────────
class StatsStore:
    """
    Best score and attempts per day, cached in memory and written through
    to a backend on every change.

    `today` returns the current date; tests pass a fixed one.
    """

    def __init__(self, backend=None, key: str = STATS_KEY, today=datetime.date.today):
        self.backend = backend if backend is not None else JsonFileBackend()
        self.key = key
        self._today = today
        self.stats: Stats = self.load()

    # ── Persistence ──────────────────────────────────────────────
    def load(self) -> Stats:
        try:
            raw = self.backend.get(self.key)
        except (OSError, ValueError, RecursionError) as exc:
            log.warning("Could not read stats, starting fresh: %s", exc)
            return Stats()
        try:
            return decode_stats(raw)
        except StatsDecodeError as exc:
            log.warning("Discarding unreadable stats: %s", exc)
            return Stats()

    def save(self) -> None:
        try:
            self.backend.set(self.key, self.stats.to_json())
        except (OSError, TypeError, ValueError) as exc:
            log.warning("Could not save stats: %s", exc)

    # ── Queries ──────────────────────────────────────────────────
    @property
    def today_key(self) -> str:
        return date_key(self._today())

    @property
    def best_score(self) -> int:
        return self.stats.best_score

    def attempts_today(self) -> int:
        return self.stats.attempts_by_day.get(self.today_key, 0)

    # ── Commands ─────────────────────────────────────────────────
    def record_attempt(self) -> int:
        """Count one new game for today. Returns today's new total."""
        day = self.today_key
        self.stats.attempts_by_day[day] = self.stats.attempts_by_day.get(day, 0) + 1
        self.save()
        return self.stats.attempts_by_day[day]

    def record_score(self, score: int) -> bool:
        """Store `score` as the best if it beats it. Returns True when it did."""
        if score <= self.stats.best_score:
            return False
        self.stats.best_score = score
        self.save()
        log.debug("New best score %d", score)
        return True
