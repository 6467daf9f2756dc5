"""Face-vertex reference resolution (``v``, ``v/vt``, ``v//vn``, ``v/vt/vn``).

OBJ indices are 1-based and address the ``v``/``vt``/``vn`` statements
seen *so far*.  Negative indices count back from the most recent entry,
so ``-1`` is always the last one added.  Resolution happens while the
element line is parsed, against the collection sizes at that moment.
"""

import re
from enum import Enum
from typing import NamedTuple, Optional, Sequence

from objforge.core.errors import IndexOutOfRange, MalformedIndex
from objforge.core.mesh import FaceVertex

_INDEX_RE = re.compile(r"[+-]?\d+")


class IndexForm(Enum):
    """Which optional slots a reference carries."""
    V = "v"
    V_VT = "v/vt"
    V_VN = "v//vn"
    V_VT_VN = "v/vt/vn"


FACE_FORMS = frozenset(IndexForm)
LINE_FORMS = frozenset({IndexForm.V, IndexForm.V_VT})
POINT_FORMS = frozenset({IndexForm.V})


class IndexCounts(NamedTuple):
    """Collection sizes at the time an element line is parsed."""
    vertices: int
    textures: int
    normals: int


def classify(token: str, line: int) -> tuple[IndexForm, str, str, str]:
    """Split a reference into its form and raw ``v``, ``vt``, ``vn`` parts.

    Trailing empty slots (``3/`` or ``3//``) are treated as the bare
    ``v`` form.
    """
    parts = token.split("/")
    if len(parts) > 3:
        raise MalformedIndex(token, line, "too many slashes in")
    v = parts[0]
    vt = parts[1] if len(parts) > 1 else ""
    vn = parts[2] if len(parts) > 2 else ""
    if not v:
        raise MalformedIndex(token, line, "missing vertex index in")

    if vt and vn:
        form = IndexForm.V_VT_VN
    elif vt:
        form = IndexForm.V_VT
    elif vn:
        form = IndexForm.V_VN
    else:
        form = IndexForm.V
    return form, v, vt, vn


def resolve_index(
    raw: str,
    count: int,
    collection: str,
    line: int,
    token: Optional[str] = None,
) -> int:
    """Resolve one raw index against a collection of *count* entries.

    Returns the absolute 1-based index.  Errors name *token*, the whole
    reference the index came from, when it is given.
    """
    token = token or raw
    if _INDEX_RE.fullmatch(raw) is None:
        raise MalformedIndex(token, line, f"non-numeric {collection} index in")
    value = int(raw)
    resolved = count + value + 1 if value < 0 else value
    if value == 0 or not 1 <= resolved <= count:
        raise IndexOutOfRange(collection, token, line, count)
    return resolved


def resolve_reference(
    token: str,
    counts: IndexCounts,
    line: int,
    allowed: frozenset = FACE_FORMS,
) -> tuple[IndexForm, FaceVertex]:
    """Resolve a single reference token to a :class:`FaceVertex`."""
    form, v, vt, vn = classify(token, line)
    if form not in allowed:
        raise MalformedIndex(token, line, f"{form.value} form not allowed here:")

    vertex = resolve_index(v, counts.vertices, "vertex", line, token)
    texture = resolve_index(vt, counts.textures, "texture", line, token) if vt else None
    normal = resolve_index(vn, counts.normals, "normal", line, token) if vn else None
    return form, FaceVertex(vertex, texture, normal)


def resolve_element(
    tokens: Sequence[str],
    counts: IndexCounts,
    line: int,
    allowed: frozenset = FACE_FORMS,
) -> list[FaceVertex]:
    """Resolve every reference of an element line.

    All references on one ``f``/``l`` line must use the same form.
    """
    result: list[FaceVertex] = []
    first_form = None
    for token in tokens:
        form, fv = resolve_reference(token, counts, line, allowed)
        if first_form is None:
            first_form = form
        elif form is not first_form:
            raise MalformedIndex(
                token, line, f"mixed reference forms ({first_form.value} then {form.value}):",
            )
        result.append(fv)
    return result
