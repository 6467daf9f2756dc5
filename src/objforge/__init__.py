"""objforge -- Wavefront OBJ/MTL text parsing into typed geometry and materials."""

from objforge.core.errors import (
    ErrorKind,
    IndexOutOfRange,
    InvalidNumber,
    InvalidSwitch,
    MalformedIndex,
    MaterialAttributeBeforeName,
    MissingRequiredValue,
    ParseError,
    TooManyValues,
    UnsupportedDirective,
)
from objforge.core.material import Material, TextureMap, TextureOption
from objforge.core.mesh import Face, FaceVertex, Group, ObjData
from objforge.loaders.mtl_parser import index_materials, parse_mtl
from objforge.loaders.obj_parser import parse_obj

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "Face",
    "FaceVertex",
    "Group",
    "IndexOutOfRange",
    "InvalidNumber",
    "InvalidSwitch",
    "MalformedIndex",
    "Material",
    "MaterialAttributeBeforeName",
    "MissingRequiredValue",
    "ObjData",
    "ParseError",
    "TextureMap",
    "TextureOption",
    "TooManyValues",
    "UnsupportedDirective",
    "index_materials",
    "parse_mtl",
    "parse_obj",
]
