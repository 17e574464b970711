"""
infinite-pipe: a small shell whose output never gets lost.

Every command that writes to the terminal is saved, and a line that
starts with `|` reads the last saved output instead of the keyboard.
"""

__version__ = "0.1.0"
