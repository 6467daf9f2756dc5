"""Geometry records produced by the OBJ parser (no file or GL dependencies)."""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

import numpy as np
from numpy.typing import NDArray

from objforge.constants import (
    DEFAULT_GROUP,
    DEFAULT_PARAM_V,
    DEFAULT_PARAM_W,
    DEFAULT_TEXTURE_V,
    DEFAULT_TEXTURE_W,
    DEFAULT_VERTEX_W,
)


class Vertex(NamedTuple):
    """Geometric vertex; ``color`` is set by the ``v x y z r g b`` extension."""
    x: float
    y: float
    z: float
    w: float = DEFAULT_VERTEX_W
    color: Optional[tuple[float, float, float]] = None


class TextureVertex(NamedTuple):
    u: float
    v: float = DEFAULT_TEXTURE_V
    w: float = DEFAULT_TEXTURE_W


class Normal(NamedTuple):
    """Vertex normal as written in the file; not necessarily unit length."""
    x: float
    y: float
    z: float


class ParameterVertex(NamedTuple):
    u: float
    v: float = DEFAULT_PARAM_V
    w: float = DEFAULT_PARAM_W


class FaceVertex(NamedTuple):
    """One corner of a face, line or point element.

    Indices are absolute and 1-based, i.e. the n-th ``v``/``vt``/``vn``
    statement of the file.  Relative (negative) indices are already
    resolved.  Slots the statement did not give are ``None``.
    """
    vertex_index: int
    texture_index: Optional[int] = None
    normal_index: Optional[int] = None


@dataclass
class Face:
    """Polygon of three or more corners."""
    vertices: list[FaceVertex]
    smoothing_group: Optional[int] = None

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def vertex_indices(self) -> list[int]:
        return [fv.vertex_index for fv in self.vertices]


@dataclass
class Line:
    """Polyline of two or more corners (``v`` or ``v/vt``)."""
    vertices: list[FaceVertex]

    @property
    def vertex_indices(self) -> list[int]:
        return [fv.vertex_index for fv in self.vertices]


@dataclass
class Point:
    """One or more point vertices."""
    vertices: list[FaceVertex]

    @property
    def vertex_indices(self) -> list[int]:
        return [fv.vertex_index for fv in self.vertices]


@dataclass
class Group:
    """Per-group state recorded while parsing.

    material_name / smoothing_group / object_name hold the values that
    were current when an element was last added to the group (or when
    ``usemtl`` was issued while the group was active).
    """
    name: str
    material_name: Optional[str] = None
    smoothing_group: Optional[int] = None
    object_name: Optional[str] = None
    # Display / render attributes
    bevel: Optional[bool] = None
    c_interp: Optional[bool] = None
    d_interp: Optional[bool] = None
    lod: Optional[int] = None
    texture_map: Optional[str] = None


def _default_groups() -> dict[str, Group]:
    return {DEFAULT_GROUP: Group(name=DEFAULT_GROUP)}


@dataclass
class ObjData:
    """Everything parsed from one OBJ text.

    ``faces``, ``lines`` and ``points`` are keyed by group name; a key is
    present once at least one element was recorded for that group.  An
    element parsed while several groups were active appears under each.
    """
    vertices: list[Vertex] = field(default_factory=list)
    texture_coords: list[TextureVertex] = field(default_factory=list)
    normals: list[Normal] = field(default_factory=list)
    parameter_vertices: list[ParameterVertex] = field(default_factory=list)
    groups: dict[str, Group] = field(default_factory=_default_groups)
    faces: dict[str, list[Face]] = field(default_factory=dict)
    lines: dict[str, list[Line]] = field(default_factory=dict)
    points: dict[str, list[Point]] = field(default_factory=dict)
    objects: list[str] = field(default_factory=list)
    material_libs: list[str] = field(default_factory=list)
    texture_libs: list[str] = field(default_factory=list)
    shadow_obj: Optional[str] = None
    trace_obj: Optional[str] = None

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        """Total faces over all groups (a face in two groups counts twice)."""
        return sum(len(f) for f in self.faces.values())

    def positions_array(self) -> NDArray[np.float32]:
        """Vertices as an ``(N, 4)`` float32 array of x, y, z, w."""
        arr = np.array([v[:4] for v in self.vertices], dtype=np.float32)
        return arr.reshape(-1, 4)

    def normals_array(self) -> NDArray[np.float32]:
        """Normals as an ``(N, 3)`` float32 array."""
        return np.array(self.normals, dtype=np.float32).reshape(-1, 3)

    def texcoords_array(self) -> NDArray[np.float32]:
        """Texture coordinates as an ``(N, 3)`` float32 array of u, v, w."""
        return np.array(self.texture_coords, dtype=np.float32).reshape(-1, 3)

    def face_index_array(self, group: str = DEFAULT_GROUP) -> NDArray[np.int64]:
        """Zero-based vertex indices of a group's faces as ``(F, K)``.

        All faces in the group must have the same corner count K; no
        triangulation is done here.

        Raises
        ------
        KeyError
            If the group has no faces.
        ValueError
            If the group mixes polygon sizes.
        """
        faces = self.faces[group]
        sizes = {len(f) for f in faces}
        if len(sizes) > 1:
            raise ValueError(
                f"Group {group!r} mixes polygon sizes {sorted(sizes)}"
            )
        idx = np.array([f.vertex_indices for f in faces], dtype=np.int64)
        return idx - 1
