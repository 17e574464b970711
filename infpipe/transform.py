from infpipe.nodes import Command, ContinuedCommand, ContinuedPipeline, Pipeline

PIPELINE = frozenset(["left", "pipe", "right"])
CONTINUED_PIPELINE = frozenset(["continued_pipe", "left", "pipe", "right"])
COMMAND = frozenset(["command"])
CONTINUED_COMMAND = frozenset(["continued_command", "command"])


def build_tree(raw):
    """
    Turn a raw parse group into a node, by the set of names it carries.
    Returns: Command | ContinuedCommand | Pipeline | ContinuedPipeline
    """
    shape = frozenset(raw.keys())

    # "right" is a group around the nested cmdline group
    if shape == PIPELINE:
        return Pipeline(build_tree(raw["left"]), build_tree(raw["right"][0]))
    if shape == CONTINUED_PIPELINE:
        return ContinuedPipeline(build_tree(raw["left"]), build_tree(raw["right"][0]))
    if shape == COMMAND:
        return Command(list(raw["command"]))
    if shape == CONTINUED_COMMAND:
        return ContinuedCommand(list(raw["command"]))

    raise ValueError(f"unexpected parse tree shape: {sorted(shape)}")
