"""Thread-safe bounded in-memory window of received logs plus running counters."""

import collections
import logging
import random
import string
import threading

import psutil

from log_api.models import (
    KNOWN_LEVELS,
    LogPage,
    LogRecord,
    SearchResult,
    StoreStats,
    ValidationError,
    utc_now_iso,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 1000
DEFAULT_LIMIT = 50
SEARCH_RESULT_LIMIT = 100

MISSING_FIELDS_ERROR = "Missing required fields: level and message"
MISSING_QUERY_ERROR = 'Query parameter "q" is required'

# 36^7 ids (~7.8e10); a draw that hits a live id is redrawn.
_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 7


def _empty_levels() -> dict:
    return {level: 0 for level in KNOWN_LEVELS}


def process_memory_bytes() -> int:
    """Resident set size of this process."""
    return psutil.Process().memory_info().rss


class LogStore:
    """Newest-first window of admitted records.

    All state is guarded by one lock so readers never see a half-evicted
    window or a record that is stored but not yet counted.
    """

    def __init__(self, max_size=DEFAULT_MAX_SIZE):
        self.max_size = max_size
        self._records = collections.deque()
        self._live_ids = set()
        self._lock = threading.Lock()
        self._total_received = 0
        self._by_level = _empty_levels()
        self._last_received_at = None

    def _new_id(self):
        while True:
            candidate = "rec_" + "".join(random.choices(_ID_ALPHABET, k=_ID_LENGTH))
            if candidate not in self._live_ids:
                return candidate

    def admit(self, payload) -> LogRecord:
        """Validate and insert one log document, evicting the oldest past capacity."""
        if not isinstance(payload, dict) or not payload.get("level") or not payload.get("message"):
            raise ValidationError(MISSING_FIELDS_ERROR)

        with self._lock:
            received_at = utc_now_iso()
            record = LogRecord.from_payload(payload, self._new_id(), received_at)

            self._records.appendleft(record)
            self._live_ids.add(record.id)
            while len(self._records) > self.max_size:
                evicted = self._records.pop()
                self._live_ids.discard(evicted.id)

            self._total_received += 1
            level_key = str(record.level)
            self._by_level[level_key] = self._by_level.get(level_key, 0) + 1
            self._last_received_at = received_at

        logger.info("Received %s log from %s: %s", record.level, record.source, record.message)
        return record

    def list(self, level=None, source=None, limit=DEFAULT_LIMIT, offset=0) -> LogPage:
        """Filter by exact level then exact source and return one page in store order."""
        if limit is None or limit < 0:
            limit = DEFAULT_LIMIT
        if offset is None or offset < 0:
            offset = 0

        with self._lock:
            matched = [
                r for r in self._records
                if (not level or r.level == level) and (not source or r.source == source)
            ]

        return LogPage(
            records=matched[offset:offset + limit],
            total=len(matched),
            limit=limit,
            offset=offset,
        )

    def search(self, query, level=None) -> SearchResult:
        """Case-insensitive substring match against each record's message."""
        if not query:
            raise ValidationError(MISSING_QUERY_ERROR)

        needle = str(query).lower()
        with self._lock:
            matched = [
                r for r in self._records
                if (not level or r.level == level) and needle in str(r.message).lower()
            ]

        return SearchResult(results=matched[:SEARCH_RESULT_LIMIT], total=len(matched))

    def stats(self) -> StoreStats:
        """Point-in-time copy of the counters."""
        with self._lock:
            snapshot = StoreStats(
                total_received=self._total_received,
                by_level=dict(self._by_level),
                last_received_at=self._last_received_at,
                total_logs=len(self._records),
            )
        snapshot.memory_bytes = process_memory_bytes()
        return snapshot

    def clear(self) -> int:
        """Drop every record, reset all counters and return how many records were held."""
        with self._lock:
            count = len(self._records)
            self._records.clear()
            self._live_ids.clear()
            self._total_received = 0
            self._by_level = _empty_levels()
            self._last_received_at = None

        logger.info("Cleared %d logs", count)
        return count

    @property
    def current_size(self):
        """Number of records currently held in the window."""
        with self._lock:
            return len(self._records)
