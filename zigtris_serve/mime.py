"""Extension to Content-Type lookup for served assets."""

import os
from types import MappingProxyType

# Matched literally against the last extension, case included
CONTENT_TYPES = MappingProxyType({
    '.js': 'application/javascript',
    '.wasm': 'application/wasm',
    '.html': 'text/html',
})

# Content sniffing result for an empty body
DEFAULT_CONTENT_TYPE = 'text/plain; charset=utf-8'


def content_type_for(path: str) -> str:
    """Return the Content-Type to send for a file at ``path``."""
    _, ext = os.path.splitext(path)
    return CONTENT_TYPES.get(ext, DEFAULT_CONTENT_TYPE)
