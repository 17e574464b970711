"""Prompt text and the typed-line history behind the up arrow."""

import os
import sys
import readline

from infpipe.config import HISTORY_FILE, MAX_HISTORY, PROMPT


def get_prompt():
    return PROMPT


def load_history(path=HISTORY_FILE):
    readline.set_history_length(MAX_HISTORY)
    if not os.path.exists(path):
        return
    try:
        readline.read_history_file(path)
    except OSError as e:
        print(f"Warning: Could not load typed lines from {path}: {e}", file=sys.stderr)


def save_history(path=HISTORY_FILE):
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        readline.write_history_file(path)
    except OSError as e:
        print(f"Warning: Could not save typed lines to {path}: {e}", file=sys.stderr)
