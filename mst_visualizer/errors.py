from __future__ import annotations


class MSTVisualizerError(Exception):
    """Base class for errors raised while building graphs or generating steps."""


class EmptyGraphError(MSTVisualizerError, ValueError):
    pass


class DuplicateEdgeError(MSTVisualizerError, ValueError):
    pass


class InvalidEdgeEndpointError(MSTVisualizerError, KeyError):
    def __str__(self) -> str:
        # KeyError repr()s its message; keep it readable in HTTP/CLI output.
        return str(self.args[0]) if self.args else ""
