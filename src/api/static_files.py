"""
Static file serving for the public site directory.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Union
from urllib.parse import unquote

from fastapi import status
from fastapi.responses import FileResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = "index.html"
FALLBACK_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".webp": "image/webp",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
}


def content_type_for(path: Union[str, Path]) -> str:
    return MIME_TYPES.get(os.path.splitext(str(path))[1].lower(), FALLBACK_CONTENT_TYPE)


@dataclass(frozen=True)
class StaticAsset:
    path: Path
    content_type: str


class ForbiddenPathError(Exception):
    pass


class AssetNotFoundError(Exception):
    pass


class StaticFileServer:
    """
    Resolves request paths to files under a fixed root directory.

    Paths that would leave the root answer 403. Anything that is not a readable
    regular file answers 404, whatever the underlying cause.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = os.path.abspath(str(root))

    def resolve(self, request_path: str) -> StaticAsset:
        path = unquote(request_path.split("?", 1)[0])
        if path in ("", "/"):
            path = "/" + DEFAULT_DOCUMENT

        segments = path.replace("\\", "/").split("/")
        if ".." in segments:
            raise ForbiddenPathError(path)

        candidate = os.path.normpath(os.path.join(self.root, path.lstrip("/")))
        if candidate != self.root and not candidate.startswith(self.root + os.sep):
            raise ForbiddenPathError(path)

        try:
            st = os.stat(candidate)
        except (OSError, ValueError) as e:
            logger.debug("static lookup failed for %s: %s", candidate, e)
            raise AssetNotFoundError(path)
        if not stat.S_ISREG(st.st_mode):
            raise AssetNotFoundError(path)
        # headers go out before FileResponse opens the file, so check it now
        try:
            with open(candidate, "rb"):
                pass
        except OSError as e:
            logger.debug("static file unreadable %s: %s", candidate, e)
            raise AssetNotFoundError(path)

        return StaticAsset(path=Path(candidate), content_type=content_type_for(candidate))

    def serve(self, request_path: str) -> Response:
        try:
            asset = self.resolve(request_path)
        except ForbiddenPathError:
            logger.info("rejected path traversal attempt: %r", request_path)
            return PlainTextResponse("Forbidden", status_code=status.HTTP_403_FORBIDDEN)
        except AssetNotFoundError:
            return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)

        # FileResponse streams the file in chunks
        return FileResponse(asset.path, media_type=asset.content_type)
