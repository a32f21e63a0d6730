"""Static file server for the pre-built zigtris web assets."""

from .config import ServerConfig, VARIANTS
from .errors import ServerStartError, ZigtrisServeError
from .mime import CONTENT_TYPES, DEFAULT_CONTENT_TYPE, content_type_for

__all__ = [
    "CONTENT_TYPES",
    "DEFAULT_CONTENT_TYPE",
    "ServerConfig",
    "ServerStartError",
    "VARIANTS",
    "ZigtrisServeError",
    "content_type_for",
]
