"""
The four node kinds a command line turns into.

Each one runs with `execute(stdin, stdout, runtime)`, where stdin/stdout are
file descriptors for its edge of the pipeline. It returns every process
handle it started, directly or through its children, so the caller can wait
for all of them.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Command:
    args: List[str]

    def execute(self, stdin, stdout, runtime):
        # Intermediate stage: plain spawn, nothing to capture
        if not runtime.is_terminal(stdout):
            return runtime.spawn(self.args, stdin, stdout)

        reader, writer = runtime.pipe()
        try:
            try:
                handles = runtime.spawn(self.args, stdin, writer)
            finally:
                os.close(writer)
            # Never started: nothing to show or keep
            if not handles:
                return handles
            output = runtime.drain(reader)
        finally:
            os.close(reader)

        runtime.show(output)
        runtime.archive(output)
        return handles


@dataclass
class ContinuedCommand:
    args: List[str]

    def execute(self, stdin, stdout, runtime):
        # Output is not captured: the entry being continued stays the latest
        reader = runtime.history_pipe()
        try:
            return runtime.spawn(self.args, reader, stdout)
        finally:
            os.close(reader)


@dataclass
class Pipeline:
    left: object
    right: object

    def execute(self, stdin, stdout, runtime):
        return connect(self.left, self.right, stdin, stdout, runtime)


@dataclass
class ContinuedPipeline:
    left: object
    right: object

    def execute(self, stdin, stdout, runtime):
        reader = runtime.history_pipe()
        try:
            return connect(self.left, self.right, reader, stdout, runtime)
        finally:
            os.close(reader)


def connect(left, right, stdin, stdout, runtime):
    """
    Run left into a fresh pipe and right out of it.
    The parent's write end is closed before right runs: right may drain its
    own output synchronously and must be able to see end-of-stream.
    """
    reader, writer = runtime.pipe()
    try:
        try:
            handles = left.execute(stdin, writer, runtime)
        finally:
            os.close(writer)
        return handles + right.execute(reader, stdout, runtime)
    finally:
        os.close(reader)
