"""
Static asset request handler

Every request is answered from the configured root directory by
SimpleHTTPRequestHandler. This class decides the Content-Type, adds the
CORS header, keeps requests inside the root, turns directory requests
into the configured index file and answers single byte-range requests.
"""

import http.server
import os
import re
from functools import partial
from typing import Optional, Tuple

from .config import ServerConfig
from .errors import RangeNotSatisfiable
from .mime import content_type_for

BYTE_RANGE_RE = re.compile(r'^bytes=(\d*)-(\d*)$')


def parse_byte_range(header: str, size: int) -> Optional[Tuple[int, int]]:
    """Parse a single ``bytes=`` Range header against a file of ``size`` bytes.

    Returns the inclusive ``(start, end)`` pair, or None when the header is
    not a single byte range and should be ignored. Raises
    RangeNotSatisfiable when the range lies outside the file.
    """
    match = BYTE_RANGE_RE.match(header.strip())
    if not match:
        return None
    first, last = match.groups()
    if not first and not last:
        return None

    if not first:
        # "bytes=-N" is the last N bytes
        suffix = int(last)
        if suffix == 0 or size == 0:
            raise RangeNotSatisfiable(size)
        return max(size - suffix, 0), size - 1

    start = int(first)
    end = int(last) if last else size - 1
    if end < start:
        return None
    if start >= size:
        raise RangeNotSatisfiable(size)
    return start, min(end, size - 1)


class StaticAssetHandler(http.server.SimpleHTTPRequestHandler):
    """Serve files under ``config.root`` with fixed content types."""

    server_version = "zigtris-serve"

    def __init__(self, *args, config: ServerConfig, **kwargs):
        # Must be set before the base class handles the request
        self.config = config
        self.range_length = None
        super().__init__(*args, directory=str(config.root), **kwargs)

    def send_response(self, code, message=None):
        super().send_response(code, message)
        if code == http.HTTPStatus.OK:
            self.send_header('Accept-Ranges', 'bytes')

    def end_headers(self):
        self.send_header('Access-Control-Allow-Origin', '*')
        super().end_headers()

    def guess_type(self, path):
        return content_type_for(path)

    def translate_path(self, path):
        path = super().translate_path(path)
        # Only "dir/" maps to the index; "dir" gets the base class redirect
        if path.endswith('/') and os.path.isdir(path):
            path = os.path.join(path, self.config.index)
        return path

    def send_head(self):
        self.range_length = None
        path = self.translate_path(self.path)
        if not self._within_root(path):
            self.send_error(http.HTTPStatus.FORBIDDEN, "Path escapes the served directory")
            return None
        if 'Range' in self.headers and os.path.isfile(path):
            return self.send_range_head(path)
        return super().send_head()

    def send_range_head(self, path):
        """Send the headers for a byte-range request and return the positioned file."""
        try:
            f = open(path, 'rb')
        except OSError:
            self.send_error(http.HTTPStatus.NOT_FOUND, "File not found")
            return None

        try:
            fs = os.fstat(f.fileno())
            try:
                byte_range = parse_byte_range(self.headers['Range'], fs.st_size)
            except RangeNotSatisfiable as e:
                f.close()
                self.send_response(http.HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE)
                self.send_header('Content-Range', f'bytes */{e.size}')
                self.send_header('Content-Length', '0')
                self.end_headers()
                return None

            if byte_range is None:
                f.close()
                return super().send_head()

            start, end = byte_range
            self.range_length = end - start + 1
            f.seek(start)
            self.send_response(http.HTTPStatus.PARTIAL_CONTENT)
            self.send_header('Content-type', self.guess_type(path))
            self.send_header('Content-Range', f'bytes {start}-{end}/{fs.st_size}')
            self.send_header('Content-Length', str(self.range_length))
            self.send_header('Last-Modified', self.date_time_string(fs.st_mtime))
            self.end_headers()
            return f
        except Exception:
            f.close()
            raise

    def copyfile(self, source, outputfile):
        if self.range_length is None:
            super().copyfile(source, outputfile)
            return
        remaining = self.range_length
        while remaining > 0:
            chunk = source.read(min(remaining, 64 * 1024))
            if not chunk:
                break
            outputfile.write(chunk)
            remaining -= len(chunk)

    def list_directory(self, path):
        self.send_error(http.HTTPStatus.NOT_FOUND, "File not found")
        return None

    def log_message(self, format, *args):
        if self.config.verbose:
            super().log_message(format, *args)

    def _within_root(self, path: str) -> bool:
        root = os.path.realpath(self.directory)
        target = os.path.realpath(path)
        try:
            return os.path.commonpath([root, target]) == root
        except ValueError:
            # Different drives on Windows
            return False


def make_handler(config: ServerConfig):
    """Bind ``config`` into a handler class usable by an HTTP server."""
    return partial(StaticAssetHandler, config=config)
