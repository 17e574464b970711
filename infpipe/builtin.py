import os
import time

from infpipe.nodes import Command

HELP = """infinite-pipe help:
 Built-in commands:
  cd [dir]      : change directory
  exit          : exit shell
  help          : print this help
  history       : list saved terminal output

Features:
  Pipes using |
  Single quotes keep spaces: echo 'a  b'
  A line starting with | reads the last saved output:
    $ ls
    $ | grep py | wc -l"""


def builtin_help(runtime):
    """Print help message"""
    runtime.echo(HELP)
    return 0


def builtin_cd(runtime, args):
    """Change directory"""
    path = args[0] if args else os.path.expanduser("~")
    try:
        os.chdir(os.path.expanduser(path))
        return 0
    except OSError as e:
        runtime.echo(f"cd: {e}")
        return 1


def builtin_history(runtime):
    """List saved stdout entries, oldest first"""
    store = runtime.store
    entries = store.entries()
    if not entries:
        runtime.echo("No saved output.")
        return 0

    for i, path in enumerate(entries, 1):
        stamp = store.timestamp(os.path.basename(path))
        when = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(stamp))
        try:
            size = os.path.getsize(path)
        except OSError:
            size = "?"
        runtime.echo(f"{i:<5} {when}  {size} bytes")
    return 0


def execute_builtin(node, runtime):
    """
    Execute built-in command if the node is one. Output goes to the
    runtime's terminal and is never saved to history.
    Returns (executed: bool, exit_code: int)
    """
    if not isinstance(node, Command):
        return False, 0

    cmd = node.args[0]
    args = node.args[1:]

    builtins = {
        "cd": lambda: builtin_cd(runtime, args),
        "help": lambda: builtin_help(runtime),
        "history": lambda: builtin_history(runtime),
    }

    if cmd in builtins:
        return True, builtins[cmd]()
    return False, 0
