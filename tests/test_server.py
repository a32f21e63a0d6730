import socket

import pytest

from zigtris_serve.config import ServerConfig
from zigtris_serve.errors import ServerStartError, ZigtrisServeError
from zigtris_serve.server import create_server, serve


def test_bind_failure_raises(web_root):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
        taken.bind(("127.0.0.1", 0))
        taken.listen(1)
        port = taken.getsockname()[1]

        with pytest.raises(ServerStartError, match=f"Could not bind 127.0.0.1:{port}"):
            create_server(ServerConfig(root=web_root, host="127.0.0.1", port=port))


def test_start_errors_share_a_base_class():
    assert issubclass(ServerStartError, ZigtrisServeError)


def test_serve_requires_asset_directory(tmp_path):
    with pytest.raises(ServerStartError, match="Asset directory not found"):
        serve(ServerConfig(root=tmp_path / "zig-out" / "web", host="127.0.0.1", port=0))


def test_serve_prints_address_and_stops_on_interrupt(web_root, monkeypatch, capsys):
    def interrupt(self, poll_interval=0.5):
        raise KeyboardInterrupt

    monkeypatch.setattr("http.server.ThreadingHTTPServer.serve_forever", interrupt)
    serve(ServerConfig(root=web_root, host="127.0.0.1", port=0))

    out = capsys.readouterr().out
    assert f"Serving {web_root.resolve()} at http://127.0.0.1:0/" in out
    assert "Shutting down server..." in out
