import os
import sys


def int_setting(name, default):
    """Integer from the environment; a bad value warns and keeps the default."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        print(f"Warning: {name}={value!r} is not a number, using {default}", file=sys.stderr)
        return default


HOME_DIR = os.path.expanduser(os.getenv("INFPIPE_HOME", "~/.infinite-pipe"))

# Captured terminal output, one file per top-level command
STDOUT_HISTORY_DIR = os.path.join(HOME_DIR, "stdout-history")
STDOUT_SUFFIX = ".stdout"
MAX_SAVED_STDOUTS = int_setting("INFPIPE_MAX_SAVED_STDOUTS", 0)  # 0 = keep all

# Typed lines (readline)
HISTORY_FILE = os.path.join(HOME_DIR, "line-history")
MAX_HISTORY = 1000

PROMPT = "$ "
