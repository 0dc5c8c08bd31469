"""
High score persistence.

Scores live in a small JSON object on disk, addressed by key. Older builds
stored the score under a different key; it is still read as a fallback and
removed the first time a new high score is written under the current key.

All of this is best-effort: a missing, unreadable or corrupt file behaves
like an empty one and write failures are only logged.
"""

import json
import logging
import os

from flappy import config

logger = logging.getLogger(__name__)


class JsonKeyValueStore:
    """A flat key/value mapping persisted as one JSON file."""

    def __init__(self, path=config.HIGH_SCORE_FILE):
        # str or os.PathLike; kept as str so the temp name can be derived
        self.path = os.fspath(path)

    def _read(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable score file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring score file %s: expected an object", self.path)
            return {}
        return data

    def _write(self, data):
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning("Could not write score file %s: %s", self.path, e)
            try:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
            except OSError:
                logger.debug("Leaving stale temp file %s", tmp_path)

    def get(self, key, default=None):
        return self._read().get(key, default)

    def set(self, key, value):
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key):
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def __contains__(self, key):
        return key in self._read()


def _as_score(raw):
    """Coerce a stored value to a non-negative int, 0 when it is not one."""
    if raw is None or isinstance(raw, bool):
        return 0
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, value)


class HighScoreStore:
    """Reads and writes the high score through a key/value store."""

    def __init__(self, kv=None, key=config.HIGH_SCORE_KEY,
                 legacy_key=config.LEGACY_HIGH_SCORE_KEY):
        self.kv = kv if kv is not None else JsonKeyValueStore()
        self.key = key
        self.legacy_key = legacy_key

    def load(self):
        """Return the stored high score, falling back to the legacy key."""
        raw = self.kv.get(self.key)
        if raw is None:
            raw = self.kv.get(self.legacy_key)
            if raw is not None:
                logger.debug("High score read from legacy key %s", self.legacy_key)
        return _as_score(raw)

    def save(self, score):
        """Store a new high score and drop the legacy entry if there is one."""
        self.kv.set(self.key, int(score))
        if self.legacy_key in self.kv:
            self.kv.remove(self.legacy_key)
            logger.info("Migrated high score from %s to %s", self.legacy_key, self.key)
