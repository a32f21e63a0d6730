import threading

import pytest

from zigtris_serve.config import ServerConfig
from zigtris_serve.server import create_server

ASSETS = {
    "index.html": b"<!doctype html><title>index</title>",
    "zigtris.html": b"<!doctype html><title>zigtris</title>",
    "zigtris.js": b"console.log('zigtris');",
    "zigtris.wasm": b"\x00asm\x01\x00\x00\x00",
    "style.css": b"body { margin: 0; }",
    "notes.txt": b"plain text",
    "UPPER.HTML": b"<p>shouting</p>",
    "LICENSE": b"no extension",
    "sub/index.html": b"<p>nested index</p>",
    "sub/level.js": b"export const level = 1;",
}


@pytest.fixture
def web_root(tmp_path):
    root = tmp_path / "web"
    for name, data in ASSETS.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    (tmp_path / "secret.txt").write_bytes(b"outside the root")
    return root


@pytest.fixture
def run_server(web_root):
    """Start a server on an ephemeral port; returns its (host, port)."""
    servers = []

    def start(**overrides):
        options = {"root": web_root, "host": "127.0.0.1", "port": 0}
        options.update(overrides)
        httpd = create_server(ServerConfig(**options))
        thread = threading.Thread(target=httpd.serve_forever, daemon=True)
        thread.start()
        servers.append((httpd, thread))
        return httpd.server_address[:2]

    yield start

    for httpd, thread in servers:
        httpd.shutdown()
        httpd.server_close()
        thread.join(timeout=5)


@pytest.fixture
def server(run_server):
    return run_server()
