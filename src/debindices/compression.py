"""Decompression adapters that turn index files into text streams for the parser."""

import bz2
import gzip
import io
import logging
import lzma
from enum import Enum
from pathlib import Path
from typing import BinaryIO, TextIO

from debindices.constants import DEFAULT_KEY_FIELD, INDEX_ENCODING
from debindices.models import Package
from debindices.parser import parse

logger = logging.getLogger(__name__)


class Compression(str, Enum):
    """Compression formats used for Packages indices.
    NONE: plain ``Packages``
    GZIP: ``Packages.gz``
    BZIP2: ``Packages.bz2``
    XZ: ``Packages.xz``
    """

    NONE = "none"
    GZIP = "gzip"
    BZIP2 = "bzip2"
    XZ = "xz"


_MAGIC = (
    (b"\x1f\x8b", Compression.GZIP),
    (b"BZh", Compression.BZIP2),
    (b"\xfd7zXZ\x00", Compression.XZ),
)
_SUFFIXES = {
    ".gz": Compression.GZIP,
    ".bz2": Compression.BZIP2,
    ".xz": Compression.XZ,
}
_OPENERS = {
    Compression.GZIP: gzip.open,
    Compression.BZIP2: bz2.open,
    Compression.XZ: lzma.open,
}
MAGIC_LENGTH = max(len(magic) for magic, _ in _MAGIC)


def detect_compression(head: bytes, name: str = "") -> Compression:
    """Identify the compression of an index from its leading bytes.

    Args:
        head: The first bytes of the index (at least MAGIC_LENGTH where available)
        name: Optional file name, only used to warn when its suffix disagrees

    Returns:
        The detected compression, NONE when no known magic matches
    """
    detected = next((compression for magic, compression in _MAGIC if head.startswith(magic)), Compression.NONE)
    expected = _SUFFIXES.get(Path(name).suffix.lower(), Compression.NONE) if name else detected
    if head and expected != detected:
        logger.warning(f"{name} looks like {detected.value} data despite its suffix; reading as {detected.value}")
    return detected


def _open_text(source, compression: Compression, encoding: str | None) -> TextIO:
    encoding = encoding or INDEX_ENCODING
    if opener := _OPENERS.get(compression):
        return opener(source, "rt", encoding=encoding, newline="")
    if isinstance(source, Path):
        return source.open("rt", encoding=encoding, newline="")
    return io.TextIOWrapper(source, encoding=encoding, newline="")


def _read_head(raw: BinaryIO) -> tuple[bytes, BinaryIO]:
    """Read up to MAGIC_LENGTH leading bytes and return a stream still positioned at the start."""
    start = raw.tell() if raw.seekable() else None
    head = b""
    # pipes may hand back fewer bytes than asked for
    while len(head) < MAGIC_LENGTH:
        chunk = raw.read(MAGIC_LENGTH - len(head))
        if not chunk:
            break
        head += chunk
    if start is not None:
        raw.seek(start)
        return head, raw
    return head, io.BytesIO(head + raw.read())


def wrap_stream(
    raw: BinaryIO,
    compression: Compression | None = None,
    encoding: str | None = None,
) -> TextIO:
    """Wrap an open binary stream (e.g. stdin) as a decoded text stream.

    Args:
        raw: Binary stream positioned at the start of the index
        compression: Known compression, or None to detect it from the leading bytes
        encoding: Text encoding, defaults to DEBINDICES_ENCODING

    Returns:
        Text stream yielding the index's lines. For compressed input, closing it
        leaves ``raw`` open.
    """
    if compression is None:
        head, raw = _read_head(raw)
        compression = detect_compression(head)

    logger.debug(f"Reading index stream with compression={compression.value}")
    return _open_text(raw, compression, encoding)


def open_index(path: Path | str, encoding: str | None = None) -> TextIO:
    """Open a local Packages, Packages.gz, Packages.bz2 or Packages.xz file as text.

    The caller is responsible for closing the returned stream.
    """
    path = Path(path)
    with path.open("rb") as probe:
        head = probe.read(MAGIC_LENGTH)
    compression = detect_compression(head, path.name)
    logger.debug(f"Opening {path} with compression={compression.value}")
    return _open_text(path, compression, encoding)


def parse_file(
    path: Path | str,
    key_field: str = DEFAULT_KEY_FIELD,
    fail_on_duplicate: bool = False,
) -> dict[str, Package]:
    """Open, decompress and parse an index file, closing it afterwards."""
    with open_index(path) as handle:
        packages = parse(handle, key_field, fail_on_duplicate)
    logger.info(f"Parsed {len(packages)} packages from {path}")
    return packages
