import os
import sys
import threading

import psutil

from infpipe.process import wait_all

CHUNK_SIZE = 65536


class Runtime:
    """
    Everything a node needs while it runs: where the terminal is, where
    captured output goes, and which processes and feeder threads are still
    outstanding for the current line.
    """

    def __init__(self, store, terminal=None, stdin=None):
        self.store = store
        self.stdin_fd = (stdin if stdin is not None else sys.stdin).fileno()
        self.terminal = terminal if terminal is not None else sys.stdout.buffer
        self.terminal_fd = self.terminal.fileno()
        self.pending = []
        self.feeders = []

    def is_terminal(self, fd):
        return fd == self.terminal_fd

    def pipe(self):
        return os.pipe()

    def spawn(self, args, stdin, stdout):
        """
        Start one stage with explicit stdin/stdout descriptors.
        Returns: [handle], or [] if the program could not be started
        """
        try:
            handle = psutil.Popen(args, stdin=stdin, stdout=stdout)
        except FileNotFoundError:
            print(f"infpipe: command not found: {args[0]}", file=sys.stderr)
            return []
        except PermissionError:
            print(f"infpipe: permission denied: {args[0]}", file=sys.stderr)
            return []
        except OSError as e:
            print(f"infpipe: failed to execute '{args[0]}': {e}", file=sys.stderr)
            return []

        self.pending.append(handle)
        return [handle]

    def drain(self, fd):
        """Read fd until end-of-stream."""
        chunks = []
        while True:
            chunk = os.read(fd, CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def show(self, output):
        self.terminal.write(output)
        self.terminal.flush()

    def echo(self, text):
        """Write a line of text to the terminal without saving it."""
        self.show((text + "\n").encode())

    def archive(self, output):
        try:
            self.store.append(output)
        except OSError as e:
            print(f"Warning: Could not save output to history: {e}", file=sys.stderr)

    def history_pipe(self):
        """
        Open a pipe that yields the last saved stdout, then end-of-stream.
        Returns: the read end, owned by the caller
        """
        content = self.store.last_saved_stdout()
        reader, writer = self.pipe()
        if not content:
            os.close(writer)
            return reader

        # Content may not fit in the pipe buffer; the consumer has to be
        # spawned before the write can finish.
        feeder = threading.Thread(target=feed, args=(writer, content), daemon=True)
        feeder.start()
        self.feeders.append(feeder)
        return reader

    def wait(self, handles=None):
        """
        Wait for handles (default: everything still pending) and feeders.
        Returns: exit status of the last handle
        """
        if handles is None:
            handles = self.pending
        try:
            return wait_all(handles)
        finally:
            for feeder in self.feeders:
                feeder.join()
            self.pending = []
            self.feeders = []


def feed(fd, content):
    """Write content to fd and close it; stop if the reader went away."""
    try:
        view = memoryview(content)
        while view:
            written = os.write(fd, view)
            view = view[written:]
    except BrokenPipeError:
        pass
    finally:
        os.close(fd)
