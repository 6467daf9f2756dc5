"""Material records produced by the MTL parser."""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Union

from objforge.constants import DEFAULT_SPECTRAL_FACTOR


class RgbColor(NamedTuple):
    r: float
    g: float
    b: float


class SpectralColor(NamedTuple):
    """Colour given as a spectral curve file (``.rfl``) and a multiplier."""
    file_name: str
    factor: float = DEFAULT_SPECTRAL_FACTOR


class XyzColor(NamedTuple):
    """Colour in the CIEXYZ colour space."""
    x: float
    y: float
    z: float


Color = Union[RgbColor, SpectralColor, XyzColor]


class TextureOption(NamedTuple):
    """A map option such as ``-mm 0.2 0.8``; arguments are left as text."""
    flag: str
    args: tuple[str, ...] = ()


@dataclass
class TextureMap:
    """A texture map statement: file name plus its raw option flags."""
    file_name: str
    options: list[TextureOption] = field(default_factory=list)

    def option(self, flag: str) -> Optional[tuple[str, ...]]:
        """Return the args of the last *flag* option, or None if absent."""
        for opt in reversed(self.options):
            if opt.flag == flag:
                return opt.args
        return None


@dataclass
class Material:
    """One ``newmtl`` block.  Unset statements stay ``None``."""
    name: str
    # Colours
    ambient: Optional[Color] = None              # Ka
    diffuse: Optional[Color] = None              # Kd
    specular: Optional[Color] = None             # Ks
    emissive: Optional[Color] = None             # Ke
    transmission_filter: Optional[Color] = None  # Tf
    # Scalars
    dissolve: Optional[float] = None             # d, or 1 - Tr
    halo: bool = False                           # d -halo
    shininess: Optional[float] = None            # Ns
    optical_density: Optional[float] = None      # Ni
    sharpness: Optional[float] = None
    illumination_model: Optional[int] = None     # illum
    # Texture maps
    map_ambient: Optional[TextureMap] = None
    map_diffuse: Optional[TextureMap] = None
    map_specular: Optional[TextureMap] = None
    map_shininess: Optional[TextureMap] = None
    map_dissolve: Optional[TextureMap] = None
    map_displacement: Optional[TextureMap] = None
    map_decal: Optional[TextureMap] = None
    map_bump: Optional[TextureMap] = None
    map_reflection: Optional[TextureMap] = None
    anti_alias: Optional[bool] = None            # map_aat
    # Other map_* statements (map_Ke, map_Pr, ...), keyed by lowercased keyword
    extra_maps: dict[str, TextureMap] = field(default_factory=dict)

    @property
    def transparency(self) -> Optional[float]:
        """``Tr`` view of the dissolve value (1.0 is fully transparent)."""
        if self.dissolve is None:
            return None
        return 1.0 - self.dissolve
