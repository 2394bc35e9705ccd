"""
Exceptions raised by the subdivision pipeline.

Every error is fatal for the current pass: the input topology is inconsistent
and a retry without changing the input would fail the same way. Each exception
keeps the offending entity as attributes and renders a compact context suffix
in its string form.
"""

from typing import Any, Dict, Optional, Sequence, Tuple


def _format_context(ctx: Optional[Dict[str, Any]]) -> str:
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for key in sorted(ctx):
        value = repr(ctx[key])
        if len(value) > 120:
            value = value[:117] + "..."
        parts.append(f"{key}={value}")
    return " | " + ", ".join(parts)


class SubdivisionError(Exception):
    """Base class for all subdivision errors.

    Args:
        message: Human-readable error
        context: Extra fields appended to the string form
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self) -> str:
        return super().__str__() + _format_context(self.context)


class MalformedFace(SubdivisionError):
    """A face does not have exactly 4 distinct, in-range vertex indices."""

    def __init__(self, face_index: Optional[int], reason: str, face: Optional[Sequence[int]] = None):
        self.face_index = face_index
        self.face = tuple(int(v) for v in face) if face is not None else None
        context = {"face": face_index}
        if self.face is not None:
            context["indices"] = self.face
        super().__init__(f"Malformed face: {reason}", context)


class NonManifoldEdge(SubdivisionError):
    """An edge is shared by more than two faces."""

    def __init__(self, edge: Tuple[int, int], faces: Sequence[int]):
        self.edge = (int(edge[0]), int(edge[1]))
        self.faces = tuple(int(f) for f in faces)
        super().__init__(
            f"Edge {self.edge} is shared by {len(self.faces)} faces",
            {"edge": self.edge, "faces": self.faces},
        )


class DanglingVertex(SubdivisionError):
    """A vertex is not touched by any edge (valence 0)."""

    def __init__(self, vertex_index: int, n_dangling: int = 1):
        self.vertex_index = int(vertex_index)
        self.n_dangling = int(n_dangling)
        super().__init__(
            f"Vertex {self.vertex_index} has valence 0",
            {"vertex": self.vertex_index, "dangling_total": self.n_dangling},
        )


class StitchMismatch(SubdivisionError):
    """Stitching could not find the edge between a face corner and its neighbour."""

    def __init__(self, face_index: int, corner: int, neighbour: int):
        self.face_index = int(face_index)
        self.corner = int(corner)
        self.neighbour = int(neighbour)
        super().__init__(
            f"No edge between vertex {self.corner} and vertex {self.neighbour} of face {self.face_index}",
            {"face": self.face_index, "corner": self.corner, "neighbour": self.neighbour},
        )


__all__ = [
    "SubdivisionError",
    "MalformedFace",
    "NonManifoldEdge",
    "DanglingVertex",
    "StitchMismatch",
]
