# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Project thumbnail generation.

A project's thumbnail is derived from its cover image, the first image
referenced in the README. The resized PNG is cached in the project
directory as thumb.png and reused on later runs:

1. thumb.png exists: return it as a data URI (no network, no resize)
2. No image in the README: no thumbnail
3. Read the cover: an http(s) URL is downloaded with a single GET and a
   non-200 raises HttpError; a relative reference is read from the project
   directory
4. Resize to the configured width (395px) keeping the aspect ratio
5. Write thumb.png
6. Return the data URI of the resized PNG

A relative cover that is missing, points outside the project directory or
uses another scheme (data:, ftp:, protocol-relative) counts as no cover.
Cover bytes Pillow cannot decode raise ImageFormatError.

thumb.png is replaced atomically, so an interrupted run never leaves a
truncated cache behind. Concurrent runs on the same directory may both
download and write thumb.png; the content is the same and the last write
wins.

Example:
    >>> generator = ThumbnailGenerator()
    >>> thumb = await generator.generate(Path("projects/01-cipher"), document)
    >>> thumb[:22]
    'data:image/png;base64,'
"""

import asyncio
import base64
import io
import tempfile
from collections.abc import Callable
from pathlib import Path
from urllib.parse import unquote, urlsplit

import httpx
from PIL import Image

from curriculum_parser.core.config.settings import ThumbnailSettings
from curriculum_parser.domains.project.document import ParsedDocument
from curriculum_parser.domains.project.exceptions import HttpError, ImageFormatError
from curriculum_parser.utils.logging import get_logger

logger = get_logger(__name__)

DATA_URI_PREFIX = "data:image/png;base64,"

REMOTE_SCHEMES = {"http", "https"}

# Image modes Pillow can write as PNG without conversion
PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}

Resizer = Callable[[bytes, int], bytes]


def to_data_uri(data: bytes) -> str:
    """Encode PNG bytes as a base64 data URI."""
    return DATA_URI_PREFIX + base64.b64encode(data).decode("ascii")


def resize_png(data: bytes, width: int) -> bytes:
    """Resize an image to the given width and encode it as PNG.

    Args:
        data: Source image bytes, in any format Pillow can read.
        width: Target width in pixels. Height keeps the aspect ratio.

    Returns:
        PNG bytes of the resized image.

    Raises:
        PIL.UnidentifiedImageError: If the bytes are not a readable image.
    """
    with Image.open(io.BytesIO(data)) as image:
        height = max(1, round(image.height * width / image.width))
        source = image if image.mode in PNG_MODES else image.convert("RGBA")
        resized = source.resize((width, height), Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    resized.save(buffer, format="PNG")
    return buffer.getvalue()


def write_atomic(path: Path, data: bytes) -> None:
    """Write bytes to a sibling temporary file, then move it onto path."""
    tmp_file = tempfile.NamedTemporaryFile(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
    )
    tmp_path = Path(tmp_file.name)
    try:
        with tmp_file:
            tmp_file.write(data)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def resolve_local_cover(directory: Path, reference: str) -> Path | None:
    """Return the cover file a relative reference points to, if it exists.

    References are resolved against the project directory; one escaping it
    is ignored.
    """
    root = directory.resolve()
    path = (root / reference.lstrip("/")).resolve()
    if not path.is_relative_to(root) or not path.is_file():
        return None
    return path


class ThumbnailGenerator:
    """Builds or reuses the cached thumbnail of a project.

    Attributes:
        settings: Thumbnail settings (file name, width, HTTP options).
    """

    def __init__(
        self,
        settings: ThumbnailSettings | None = None,
        client: httpx.AsyncClient | None = None,
        resizer: Resizer = resize_png,
    ) -> None:
        """Initialize the thumbnail generator.

        Args:
            settings: Thumbnail settings. Defaults to ThumbnailSettings().
            client: HTTP client used to download covers. When omitted a
                client is opened per download.
            resizer: Callable resizing image bytes to a PNG of given width.
        """
        self.settings = settings or ThumbnailSettings()
        self._client = client
        self._resizer = resizer

    async def generate(self, directory: Path, document: ParsedDocument) -> str | None:
        """Return the project thumbnail as a PNG data URI.

        Args:
            directory: Project directory holding the cached thumbnail.
            document: Parsed README used to find the cover image.

        Returns:
            Data URI, or None when there is no cached thumbnail and the
            README has no usable cover.

        Raises:
            HttpError: If the cover download returns a non-200 status.
            ImageFormatError: If the cover is not a readable image.
        """
        thumb_path = directory / self.settings.filename

        if await asyncio.to_thread(thumb_path.is_file):
            data = await asyncio.to_thread(thumb_path.read_bytes)
            logger.debug("thumbnail_cache_hit", path=str(thumb_path))
            return to_data_uri(data)

        cover = document.find_first("image")
        if cover is None or not cover.url:
            logger.debug("thumbnail_no_cover", readme=str(document.path))
            return None

        original = await self._read_cover(directory, cover.url)
        if original is None:
            return None

        try:
            resized = await asyncio.to_thread(self._resizer, original, self.settings.width)
        except OSError as e:
            # PIL.UnidentifiedImageError and truncated image data
            logger.warning("thumbnail_cover_unreadable", cover=cover.url, error=str(e))
            raise ImageFormatError(cover.url, document.path) from e

        await asyncio.to_thread(write_atomic, thumb_path, resized)

        logger.info(
            "thumbnail_created",
            path=str(thumb_path),
            cover=cover.url,
            size=len(resized),
        )
        return to_data_uri(resized)

    async def _read_cover(self, directory: Path, url: str) -> bytes | None:
        parts = urlsplit(url)
        if parts.scheme in REMOTE_SCHEMES and parts.netloc:
            return await self._download(url)

        if parts.scheme or parts.netloc:
            logger.warning("thumbnail_cover_unsupported", cover=url)
            return None

        path = await asyncio.to_thread(resolve_local_cover, directory, unquote(parts.path))
        if path is None:
            logger.warning("thumbnail_cover_missing", cover=url)
            return None
        return await asyncio.to_thread(path.read_bytes)

    async def _download(self, url: str) -> bytes:
        if self._client is not None:
            return await self._get(self._client, url)

        async with httpx.AsyncClient(
            timeout=self.settings.http_timeout,
            headers={"User-Agent": self.settings.user_agent},
        ) as client:
            return await self._get(client, url)

    async def _get(self, client: httpx.AsyncClient, url: str) -> bytes:
        response = await client.get(url)
        if response.status_code != 200:
            logger.warning("thumbnail_download_failed", url=url, status=response.status_code)
            raise HttpError(response.status_code, url)
        return response.content
