# src/bnet/core/errors.py
"""
Errors raised while building a network, assigning roles, or estimating.

Construction and query errors are fatal for the input that caused them.
EstimationError subclasses are recoverable: retry with more draws.
"""


class BNetError(Exception):
    """Base class for all bnet errors."""


class MalformedInput(BNetError):
    def __init__(self, message: str, line_num: int | None = None, line: str | None = None):
        self.line_num = line_num
        self.line = line
        if line_num is not None:
            message = f"Line {line_num}: {message}\n  {line}"
        super().__init__(message)


class UnknownParent(BNetError):
    def __init__(self, node_name: str, parent_name: str):
        self.node_name = node_name
        self.parent_name = parent_name
        super().__init__(f"Node {node_name} has unknown parent: {parent_name}")


class RoleCountMismatch(BNetError):
    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Query has {got} symbols, network has {expected} nodes")


class NoQueryNode(BNetError):
    def __init__(self):
        super().__init__("No node has the query role")


class MultipleQueryNodes(BNetError):
    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(f"More than one query node: {', '.join(names)}")


class EstimationError(BNetError):
    """No usable draws. Retry with a larger draw count."""


class NoConsistentSamples(EstimationError):
    def __init__(self, samples: int):
        self.samples = samples
        super().__init__(f"No sample out of {samples:,} was consistent with the evidence")


class ZeroTotalWeight(EstimationError):
    def __init__(self, samples: int):
        self.samples = samples
        super().__init__(f"Total evidence weight over {samples:,} samples is zero")
