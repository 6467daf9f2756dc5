"""Tests for face-vertex reference resolution."""

import pytest

from objforge.core.errors import IndexOutOfRange, MalformedIndex
from objforge.core.mesh import FaceVertex
from objforge.loaders.face_indices import (
    LINE_FORMS, POINT_FORMS, IndexCounts, IndexForm, classify, resolve_element,
    resolve_index, resolve_reference,
)

COUNTS = IndexCounts(vertices=5, textures=3, normals=2)


@pytest.mark.parametrize("token, form", [
    ("4", IndexForm.V),
    ("4/2", IndexForm.V_VT),
    ("4//2", IndexForm.V_VN),
    ("4/2/1", IndexForm.V_VT_VN),
    ("4/", IndexForm.V),
    ("4//", IndexForm.V),
])
def test_classify_forms(token, form):
    assert classify(token, 1)[0] is form


def test_positive_and_negative_indices():
    assert resolve_index("1", 5, "vertex", 1) == 1
    assert resolve_index("5", 5, "vertex", 1) == 5
    assert resolve_index("-1", 5, "vertex", 1) == 5
    assert resolve_index("-5", 5, "vertex", 1) == 1


@pytest.mark.parametrize("raw", ["0", "6", "-6"])
def test_out_of_range(raw):
    with pytest.raises(IndexOutOfRange) as exc:
        resolve_index(raw, 5, "vertex", 9)
    err = exc.value
    assert err.collection == "vertex"
    assert err.token == raw
    assert err.line == 9


def test_empty_texture_slot_is_absent():
    _, fv = resolve_reference("3//2", COUNTS, 1)
    assert fv == FaceVertex(3, None, 2)


def test_full_reference():
    _, fv = resolve_reference("-1/-1/-1", COUNTS, 1)
    assert fv == FaceVertex(5, 3, 2)


def test_texture_out_of_range_names_collection():
    with pytest.raises(IndexOutOfRange) as exc:
        resolve_reference("1/4", COUNTS, 3)
    assert exc.value.collection == "texture"
    assert exc.value.token == "1/4"


def test_non_numeric_slot_reports_whole_reference():
    with pytest.raises(MalformedIndex) as exc:
        resolve_reference("2/x/1", COUNTS, 1)
    assert exc.value.token == "2/x/1"
    assert "texture" in str(exc.value)


@pytest.mark.parametrize("token", ["1/2/3/4", "/1", "a", "1/b", "1//x", "1.5"])
def test_malformed(token):
    with pytest.raises(MalformedIndex):
        resolve_reference(token, COUNTS, 1)


def test_form_not_allowed_for_lines_and_points():
    with pytest.raises(MalformedIndex):
        resolve_reference("1//1", COUNTS, 1, LINE_FORMS)
    with pytest.raises(MalformedIndex):
        resolve_reference("1/1", COUNTS, 1, POINT_FORMS)


def test_element_requires_uniform_form():
    assert resolve_element(["1/1", "2/2", "3/3"], COUNTS, 1) == [
        FaceVertex(1, 1), FaceVertex(2, 2), FaceVertex(3, 3),
    ]
    with pytest.raises(MalformedIndex, match="mixed"):
        resolve_element(["1/1", "2", "3/3"], COUNTS, 1)
