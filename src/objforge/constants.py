"""Shared constants for objforge."""

# Group every element lands in until the first ``g`` statement
DEFAULT_GROUP = "default"

# Component defaults for optional trailing values
DEFAULT_VERTEX_W = 1.0
DEFAULT_TEXTURE_V = 0.0
DEFAULT_TEXTURE_W = 0.0
DEFAULT_PARAM_V = 0.0
DEFAULT_PARAM_W = 1.0  # rational weight
DEFAULT_SPECTRAL_FACTOR = 1.0

# Smoothing group ids that mean "smoothing off"
SMOOTHING_OFF = ("off", "0")

# OBJ statements that are recognised but intentionally not implemented:
# free-form curves and surfaces, their body statements, connectivity,
# merging groups and approximation techniques.
UNSUPPORTED_OBJ_KEYWORDS = frozenset({
    "cstype", "deg", "bmat", "step",
    "curv", "curv2", "surf",
    "parm", "trim", "hole", "scrv", "sp", "end",
    "con", "mg", "ctech", "stech",
})

# MTL texture-map statements and the Material field each one fills
MTL_MAP_FIELDS = {
    "map_ka": "map_ambient",
    "map_kd": "map_diffuse",
    "map_ks": "map_specular",
    "map_ns": "map_shininess",
    "map_d": "map_dissolve",
    "disp": "map_displacement",
    "map_disp": "map_displacement",
    "decal": "map_decal",
    "bump": "map_bump",
    "map_bump": "map_bump",
    "refl": "map_reflection",
}

# MTL colour statements and the Material field each one fills
MTL_COLOR_FIELDS = {
    "ka": "ambient",
    "kd": "diffuse",
    "ks": "specular",
    "ke": "emissive",
    "tf": "transmission_filter",
}

# MTL single-number statements
MTL_SCALAR_FIELDS = {
    "ns": "shininess",
    "ni": "optical_density",
    "sharpness": "sharpness",
}

# Every MTL statement that sets a field on the open material
MTL_ATTRIBUTE_KEYWORDS = frozenset(
    set(MTL_MAP_FIELDS)
    | set(MTL_COLOR_FIELDS)
    | set(MTL_SCALAR_FIELDS)
    | {"d", "tr", "illum", "map_aat"}
)

# Any other keyword with this prefix is a texture map kept in Material.extra_maps
MTL_MAP_PREFIX = "map_"

# Texture options that take a single on/off argument
MTL_SWITCH_OPTIONS = frozenset({"-blendu", "-blendv", "-cc", "-clamp"})
