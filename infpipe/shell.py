import sys

from infpipe.builtin import execute_builtin
from infpipe.executor import Runtime
from infpipe.history import HistoryStore
from infpipe.parser import ParseError, parse
from infpipe.prompt import get_prompt, load_history, save_history


def run_line(line, runtime):
    """
    Parse one line, start every process it describes, then wait for them.
    Returns: exit status of the line
    """
    try:
        tree = parse(line)
    except ParseError as e:
        print(f"infpipe: parse error at column {e.column}: {e.message}", file=sys.stderr)
        return 2

    executed, exit_code = execute_builtin(tree, runtime)
    if executed:
        return exit_code

    try:
        handles = tree.execute(runtime.stdin_fd, runtime.terminal_fd, runtime)
    except OSError as e:
        print(f"infpipe: {e}", file=sys.stderr)
        runtime.wait()
        return 1
    return runtime.wait(handles)


def main_loop(stdin=None, terminal=None, store=None):
    """Main shell loop"""
    store = store if store is not None else HistoryStore()
    try:
        store.ensure()
    except OSError as e:
        print(f"Warning: Could not create output history directory: {e}", file=sys.stderr)

    runtime = Runtime(store, terminal=terminal, stdin=stdin)
    last_status = 0

    load_history()

    try:
        while True:
            try:
                line = input(get_prompt()).strip()
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue

            if not line:
                continue

            if line == "exit":
                break

            try:
                last_status = run_line(line, runtime)
            except KeyboardInterrupt:
                # Children got the same SIGINT; reap them and prompt again
                print()
                runtime.wait()
                last_status = 130
    finally:
        save_history()

    return last_status


def main():
    sys.exit(main_loop())
