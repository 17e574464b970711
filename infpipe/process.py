import sys

import psutil


def report_exit(proc):
    """Print a line for every stage that did not exit cleanly."""
    if proc.returncode:
        print(f"infpipe: {proc.args[0]}: exited with status {proc.returncode}", file=sys.stderr)


def wait_all(handles):
    """
    Block until every handle has exited.
    Returns: exit status of the last handle (0 if there are none)
    """
    if not handles:
        return 0
    psutil.wait_procs(handles, callback=report_exit)
    return handles[-1].returncode
