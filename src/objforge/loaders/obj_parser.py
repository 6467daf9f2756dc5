"""Wavefront OBJ parser → ObjData."""

import logging
from typing import Callable, Optional

from objforge.constants import DEFAULT_GROUP, SMOOTHING_OFF, UNSUPPORTED_OBJ_KEYWORDS
from objforge.core.errors import MissingRequiredValue, TooManyValues, UnsupportedDirective
from objforge.core.mesh import (
    Face, Group, Line, Normal, ObjData, ParameterVertex, Point, TextureVertex,
    Vertex,
)
from objforge.core.numeric import parse_float, parse_int, parse_switch
from objforge.core.tokenizer import LogicalLine, iter_logical_lines
from objforge.loaders.face_indices import (
    FACE_FORMS, LINE_FORMS, POINT_FORMS, IndexCounts, resolve_element,
)

logger = logging.getLogger(__name__)

# Value counts accepted by ``v``: x y z [w] [r g b]
_VERTEX_VALUE_COUNTS = (3, 4, 6, 7)


def parse_obj(text: str) -> ObjData:
    """Parse a Wavefront OBJ string.

    Supports vertex data (``v``, ``vt``, ``vn``, ``vp``), the polygonal
    elements ``p``, ``l`` and ``f``, grouping (``g``, ``o``, ``s``,
    ``usemtl``, ``mtllib``) and the display attributes ``bevel``,
    ``c_interp``, ``d_interp``, ``lod``, ``maplib``, ``usemap``,
    ``shadow_obj`` and ``trace_obj``.  Unknown statements are skipped;
    free-form curve/surface statements raise
    :class:`~objforge.core.errors.UnsupportedDirective`.

    Parameters
    ----------
    text : str
        The OBJ file contents.

    Returns
    -------
    ObjData
        Vertex collections plus faces, lines and points keyed by group.

    Raises
    ------
    ParseError
        On the first malformed statement; no partial result is returned.
    """
    state = _ObjParseState()
    for line in iter_logical_lines(text):
        keyword = line.keyword.lower()
        handler = _OBJ_HANDLERS.get(keyword)
        if handler is None:
            if keyword in UNSUPPORTED_OBJ_KEYWORDS:
                raise UnsupportedDirective(line.keyword, line.number)
            logger.debug("Skipping unknown OBJ statement %r (line %d)",
                         line.keyword, line.number)
            continue
        handler(state, line)

    data = state.data
    logger.debug(
        "Parsed OBJ: %d vertices, %d normals, %d texcoords, %d groups",
        len(data.vertices), len(data.normals), len(data.texture_coords),
        len(data.groups),
    )
    return data


def _floats(line: LogicalLine, minimum: int, maximum: int) -> list[float]:
    """Parse all values of *line* as floats, checking the value count."""
    count = len(line.values)
    expected = (
        f"exactly {minimum} values" if minimum == maximum
        else f"{minimum} to {maximum} values"
    )
    if count < minimum:
        raise MissingRequiredValue(line.keyword, line.number, expected)
    if count > maximum:
        raise TooManyValues(line.keyword, line.number, expected)
    return [parse_float(t, line.number) for t in line.values]


def _single(line: LogicalLine, what: str) -> str:
    if not line.values:
        raise MissingRequiredValue(line.keyword, line.number, what)
    if len(line.values) > 1:
        raise TooManyValues(line.keyword, line.number, what)
    return line.values[0]


def _name(line: LogicalLine, what: str) -> str:
    """Names may contain spaces; rejoin them with single spaces."""
    if not line.values:
        raise MissingRequiredValue(line.keyword, line.number, what)
    return " ".join(line.values)


class _ObjParseState:
    """Mutable context threaded through one ``parse_obj`` call."""

    def __init__(self):
        self.data = ObjData()
        self.current_object: Optional[str] = None
        self.current_groups: list[str] = [DEFAULT_GROUP]
        self.current_material: Optional[str] = None
        self.current_smoothing_group: Optional[int] = None

    # ── Vertex data ──

    def on_vertex(self, line: LogicalLine) -> None:
        count = len(line.values)
        if count not in _VERTEX_VALUE_COUNTS:
            expected = "3 or 4 values (or 6/7 with a vertex colour)"
            if count < _VERTEX_VALUE_COUNTS[0]:
                raise MissingRequiredValue(line.keyword, line.number, expected)
            raise TooManyValues(line.keyword, line.number, expected)
        vals = [parse_float(t, line.number) for t in line.values]
        color = None
        if count >= 6:
            color = (vals[-3], vals[-2], vals[-1])
            vals = vals[:-3]
        self.data.vertices.append(Vertex(*vals, color=color))

    def on_texture_vertex(self, line: LogicalLine) -> None:
        self.data.texture_coords.append(TextureVertex(*_floats(line, 1, 3)))

    def on_normal(self, line: LogicalLine) -> None:
        self.data.normals.append(Normal(*_floats(line, 3, 3)))

    def on_parameter_vertex(self, line: LogicalLine) -> None:
        self.data.parameter_vertices.append(ParameterVertex(*_floats(line, 1, 3)))

    # ── Elements ──

    def _counts(self) -> IndexCounts:
        return IndexCounts(
            len(self.data.vertices),
            len(self.data.texture_coords),
            len(self.data.normals),
        )

    def _references(self, line: LogicalLine, minimum: int, allowed: frozenset):
        if len(line.values) < minimum:
            raise MissingRequiredValue(
                line.keyword, line.number, f"at least {minimum} vertex references",
            )
        return resolve_element(line.values, self._counts(), line.number, allowed)

    def _add_element(self, store: dict, element) -> None:
        """Record *element* under every active group and stamp group state."""
        for name in self.current_groups:
            store.setdefault(name, []).append(element)
            group = self.data.groups[name]
            group.material_name = self.current_material
            group.smoothing_group = self.current_smoothing_group
            group.object_name = self.current_object

    def on_point(self, line: LogicalLine) -> None:
        refs = self._references(line, 1, POINT_FORMS)
        self._add_element(self.data.points, Point(refs))

    def on_line(self, line: LogicalLine) -> None:
        refs = self._references(line, 2, LINE_FORMS)
        self._add_element(self.data.lines, Line(refs))

    def on_face(self, line: LogicalLine) -> None:
        refs = self._references(line, 3, FACE_FORMS)
        self._add_element(
            self.data.faces, Face(refs, smoothing_group=self.current_smoothing_group),
        )

    # ── Grouping ──

    def on_group(self, line: LogicalLine) -> None:
        # dict.fromkeys keeps first-seen order and drops repeats
        names = list(dict.fromkeys(line.values)) or [DEFAULT_GROUP]
        for name in names:
            if name not in self.data.groups:
                self.data.groups[name] = Group(name=name)
        self.current_groups = names

    def on_object(self, line: LogicalLine) -> None:
        self.current_object = _name(line, "an object name")
        self.data.objects.append(self.current_object)

    def on_smoothing(self, line: LogicalLine) -> None:
        value = _single(line, "a smoothing group number or 'off'")
        if value.lower() in SMOOTHING_OFF:
            self.current_smoothing_group = None
        else:
            self.current_smoothing_group = parse_int(value, line.number)

    def on_use_material(self, line: LogicalLine) -> None:
        self.current_material = _name(line, "a material name")
        for name in self.current_groups:
            self.data.groups[name].material_name = self.current_material

    def on_material_lib(self, line: LogicalLine) -> None:
        if not line.values:
            raise MissingRequiredValue(line.keyword, line.number, "a file name")
        self.data.material_libs.extend(line.values)

    # ── Display / render attributes ──

    def _set_on_groups(self, attr: str, value) -> None:
        for name in self.current_groups:
            setattr(self.data.groups[name], attr, value)

    def on_switch(self, line: LogicalLine) -> None:
        value = parse_switch(_single(line, "'on' or 'off'"), line.number)
        self._set_on_groups(line.keyword.lower(), value)

    def on_lod(self, line: LogicalLine) -> None:
        self._set_on_groups("lod", parse_int(_single(line, "a level"), line.number))

    def on_texture_lib(self, line: LogicalLine) -> None:
        if not line.values:
            raise MissingRequiredValue(line.keyword, line.number, "a file name")
        self.data.texture_libs.extend(line.values)

    def on_use_texture_map(self, line: LogicalLine) -> None:
        value = _name(line, "a map name or 'off'")
        self._set_on_groups("texture_map", None if value.lower() == "off" else value)

    def on_shadow_obj(self, line: LogicalLine) -> None:
        self.data.shadow_obj = _name(line, "a file name")

    def on_trace_obj(self, line: LogicalLine) -> None:
        self.data.trace_obj = _name(line, "a file name")


_OBJ_HANDLERS: dict[str, Callable[[_ObjParseState, LogicalLine], None]] = {
    "v": _ObjParseState.on_vertex,
    "vt": _ObjParseState.on_texture_vertex,
    "vn": _ObjParseState.on_normal,
    "vp": _ObjParseState.on_parameter_vertex,
    "p": _ObjParseState.on_point,
    "l": _ObjParseState.on_line,
    "f": _ObjParseState.on_face,
    "g": _ObjParseState.on_group,
    "o": _ObjParseState.on_object,
    "s": _ObjParseState.on_smoothing,
    "usemtl": _ObjParseState.on_use_material,
    "mtllib": _ObjParseState.on_material_lib,
    "bevel": _ObjParseState.on_switch,
    "c_interp": _ObjParseState.on_switch,
    "d_interp": _ObjParseState.on_switch,
    "lod": _ObjParseState.on_lod,
    "maplib": _ObjParseState.on_texture_lib,
    "usemap": _ObjParseState.on_use_texture_map,
    "shadow_obj": _ObjParseState.on_shadow_obj,
    "trace_obj": _ObjParseState.on_trace_obj,
}
