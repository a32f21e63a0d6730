"""
Server configuration

A ServerConfig is built once at startup and handed to every request
handler. It is frozen, so request threads only ever read it.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Optional

DEFAULT_ROOT = Path("zig-out") / "web"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class ServerConfig:
    """Where to listen and which directory to serve."""
    root: Path = DEFAULT_ROOT
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    index: str = "index.html"
    verbose: bool = False

    def __post_init__(self):
        object.__setattr__(self, "root", Path(self.root))
        if not 0 <= self.port <= 65535:
            raise ValueError(f"Invalid port {self.port}: must be between 0 and 65535")
        if not self.index or "/" in self.index:
            raise ValueError(f"Invalid index file name '{self.index}'")

    @classmethod
    def for_variant(cls, name: str, **overrides) -> "ServerConfig":
        """Build a config from a named preset; ``None`` overrides are ignored."""
        try:
            base = VARIANTS[name]
        except KeyError:
            choices = ", ".join(sorted(VARIANTS))
            raise ValueError(f"Unknown variant '{name}'. Must be one of: {choices}") from None
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(base, **changes)

    @property
    def display_url(self) -> str:
        host = "localhost" if self.host in ("", "0.0.0.0") else self.host
        return f"http://{host}:{self.port}/"


# The two ways the asset directory is served: reachable from the network
# with index.html at "/", or bound to localhost with the game page at "/".
VARIANTS: Dict[str, ServerConfig] = {
    "web": ServerConfig(),
    "local": ServerConfig(host="localhost", index="zigtris.html"),
}


def resolve_root(config: ServerConfig, base: Optional[Path] = None) -> ServerConfig:
    """Return a copy of ``config`` whose root is an absolute path."""
    root = config.root
    if not root.is_absolute():
        root = (base or Path.cwd()) / root
    return replace(config, root=root.resolve())
