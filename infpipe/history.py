import os
import sys
import time

from infpipe.config import MAX_SAVED_STDOUTS, STDOUT_HISTORY_DIR, STDOUT_SUFFIX


class HistoryStore:
    """
    Directory of captured terminal output, one `<epoch seconds><suffix>` file
    per top-level command. The newest timestamp is the latest entry.
    """

    def __init__(self, directory=STDOUT_HISTORY_DIR, suffix=STDOUT_SUFFIX, limit=MAX_SAVED_STDOUTS):
        self.directory = directory
        self.suffix = suffix
        self.limit = limit

    def ensure(self):
        os.makedirs(self.directory, exist_ok=True)

    def timestamp(self, name):
        """Timestamp encoded in an entry name, or None for stray files."""
        if not name.endswith(self.suffix):
            return None
        stem = name[: -len(self.suffix)]
        return int(stem) if stem.isdecimal() else None

    def entries(self):
        """Entry paths, oldest first."""
        try:
            names = os.listdir(self.directory)
        except FileNotFoundError:
            return []

        stamped = []
        for name in names:
            stamp = self.timestamp(name)
            if stamp is not None:
                stamped.append((stamp, os.path.join(self.directory, name)))
        stamped.sort()
        return [path for _, path in stamped]

    def latest(self):
        entries = self.entries()
        return entries[-1] if entries else None

    def read(self, path):
        with open(path, "rb") as f:
            return f.read()

    def last_saved_stdout(self):
        """Bytes of the latest entry; empty when there is none or it can't be read."""
        try:
            path = self.latest()
            return self.read(path) if path else b""
        except OSError as e:
            print(f"Warning: Could not read output history: {e}", file=sys.stderr)
            return b""

    def append(self, data, now=None):
        """
        Save data as a new entry named by the current second.
        A second append within the same second replaces the first.
        Returns: path of the entry
        """
        stamp = int(now if now is not None else time.time())
        path = os.path.join(self.directory, f"{stamp}{self.suffix}")
        with open(path, "wb") as f:
            f.write(data)

        if self.limit > 0:
            self.prune()
        return path

    def prune(self):
        """Drop the oldest entries beyond the configured limit."""
        for path in self.entries()[: -self.limit]:
            try:
                os.remove(path)
            except FileNotFoundError:
                pass
