"""Wavefront MTL parser → list of Material."""

import logging
from typing import Iterable, Optional

from objforge.constants import (
    DEFAULT_SPECTRAL_FACTOR,
    MTL_ATTRIBUTE_KEYWORDS,
    MTL_COLOR_FIELDS,
    MTL_MAP_FIELDS,
    MTL_MAP_PREFIX,
    MTL_SCALAR_FIELDS,
    MTL_SWITCH_OPTIONS,
)
from objforge.core.errors import (
    MaterialAttributeBeforeName, MissingRequiredValue, TooManyValues,
)
from objforge.core.material import (
    Color, Material, RgbColor, SpectralColor, TextureMap, TextureOption, XyzColor,
)
from objforge.core.numeric import is_number, parse_float, parse_int, parse_switch
from objforge.core.tokenizer import LogicalLine, iter_logical_lines

logger = logging.getLogger(__name__)


def parse_mtl(text: str) -> list[Material]:
    """Parse a Wavefront MTL string into materials, in file order.

    Each ``newmtl`` opens a new record; following statements fill it until
    the next ``newmtl`` or end of input.  A repeated name opens another
    record rather than merging (see :func:`index_materials`).

    Parameters
    ----------
    text : str
        The MTL file contents.

    Returns
    -------
    list[Material]

    Raises
    ------
    ParseError
        On the first malformed statement, or a material statement that
        appears before any ``newmtl``.
    """
    materials: list[Material] = []
    current: Optional[Material] = None

    for line in iter_logical_lines(text):
        keyword = line.keyword.lower()
        if keyword == "newmtl":
            if not line.values:
                raise MissingRequiredValue(line.keyword, line.number, "a material name")
            if current is not None:
                materials.append(current)
            current = Material(name=" ".join(line.values))
        elif _is_attribute(keyword):
            if current is None:
                raise MaterialAttributeBeforeName(line.keyword, line.number)
            _apply_attribute(current, keyword, line)
        else:
            logger.debug("Skipping unknown MTL statement %r (line %d)",
                         line.keyword, line.number)

    if current is not None:
        materials.append(current)

    logger.debug("Parsed MTL: %d materials", len(materials))
    return materials


def index_materials(materials: Iterable[Material]) -> dict[str, Material]:
    """Map material names to records; a later duplicate name wins."""
    return {m.name: m for m in materials}


def _is_attribute(keyword: str) -> bool:
    return keyword in MTL_ATTRIBUTE_KEYWORDS or keyword.startswith(MTL_MAP_PREFIX)


def _apply_attribute(material: Material, keyword: str, line: LogicalLine) -> None:
    """Overwrite the field of *material* that *keyword* sets."""
    if keyword in MTL_COLOR_FIELDS:
        setattr(material, MTL_COLOR_FIELDS[keyword], _parse_color(line))
    elif keyword in MTL_SCALAR_FIELDS:
        setattr(material, MTL_SCALAR_FIELDS[keyword], parse_float(_single(line), line.number))
    elif keyword in MTL_MAP_FIELDS:
        setattr(material, MTL_MAP_FIELDS[keyword], _parse_texture_map(line))
    elif keyword == "d":
        _parse_dissolve(material, line)
    elif keyword == "tr":
        # Tr is the inverse of d; whichever comes last wins
        material.dissolve = 1.0 - parse_float(_single(line), line.number)
        material.halo = False
    elif keyword == "illum":
        material.illumination_model = parse_int(_single(line), line.number)
    elif keyword == "map_aat":
        material.anti_alias = parse_switch(_single(line), line.number)
    else:
        material.extra_maps[keyword] = _parse_texture_map(line)


def _single(line: LogicalLine) -> str:
    if not line.values:
        raise MissingRequiredValue(line.keyword, line.number, "a value")
    if len(line.values) > 1:
        raise TooManyValues(line.keyword, line.number, "a single value")
    return line.values[0]


def _parse_components(line: LogicalLine, values: tuple[str, ...]) -> tuple[float, float, float]:
    """1 to 3 numbers; missing second and third components repeat the first."""
    if not values:
        raise MissingRequiredValue(line.keyword, line.number, "1 to 3 values")
    if len(values) > 3:
        raise TooManyValues(line.keyword, line.number, "1 to 3 values")
    nums = [parse_float(t, line.number) for t in values]
    while len(nums) < 3:
        nums.append(nums[0])
    return nums[0], nums[1], nums[2]


def _parse_color(line: LogicalLine) -> Color:
    """Parse ``r [g b]``, ``spectral file [factor]`` or ``xyz x [y z]``."""
    values = line.values
    head = values[0].lower() if values else ""

    if head == "spectral":
        if len(values) < 2:
            raise MissingRequiredValue(line.keyword, line.number, "a spectral file name")
        if len(values) > 3:
            raise TooManyValues(line.keyword, line.number, "a file name and a factor")
        factor = (
            parse_float(values[2], line.number) if len(values) == 3
            else DEFAULT_SPECTRAL_FACTOR
        )
        return SpectralColor(values[1], factor)

    if head == "xyz":
        return XyzColor(*_parse_components(line, values[1:]))

    return RgbColor(*_parse_components(line, values))


def _parse_dissolve(material: Material, line: LogicalLine) -> None:
    values = line.values
    if values and values[0].lower() == "-halo":
        if len(values) != 2:
            raise MissingRequiredValue(line.keyword, line.number, "a factor after -halo")
        material.dissolve = parse_float(values[1], line.number)
        material.halo = True
    else:
        material.dissolve = parse_float(_single(line), line.number)
        material.halo = False


def _is_flag(token: str) -> bool:
    return token.startswith("-") and not is_number(token)


def _parse_texture_map(line: LogicalLine) -> TextureMap:
    """Split a map statement into option flags and the file name.

    Options are passed through as text: each ``-flag`` collects the
    tokens after it, and the last token is the file name.  A statement
    with no options at all keeps every token as one space-joined file
    name.  A trailing ``on``/``off`` that belongs to a switch option
    such as ``-clamp`` is not a file name.
    """
    values = line.values
    if not values:
        raise MissingRequiredValue(line.keyword, line.number, "a file name")
    if not any(_is_flag(t) for t in values):
        return TextureMap(" ".join(values))

    file_name = values[-1]
    if _is_flag(file_name) or (
        len(values) >= 2
        and values[-2].lower() in MTL_SWITCH_OPTIONS
        and file_name.lower() in ("on", "off")
    ):
        raise MissingRequiredValue(line.keyword, line.number, "a file name after the options")

    options: list[TextureOption] = []
    flag = None
    args: list[str] = []
    for token in values[:-1]:
        if _is_flag(token):
            if flag is not None:
                options.append(TextureOption(flag, tuple(args)))
            flag, args = token, []
        elif flag is None:
            raise TooManyValues(
                line.keyword, line.number, "options starting with '-' before the file name",
            )
        else:
            args.append(token)
    if flag is not None:
        options.append(TextureOption(flag, tuple(args)))

    return TextureMap(file_name, options)
