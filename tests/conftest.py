from __future__ import annotations

import bz2
import gzip
import lzma
from pathlib import Path

import pytest

SAMPLE_INDEX = """\
Package: hello
Priority: optional
Section: devel
Installed-Size: 280
Maintainer: Santiago Vila <sanvila@debian.org>
Architecture: amd64
Version: 2.10-3
Depends: libc6 (>= 2.34)
Description: example package based on GNU hello
 The GNU hello program produces a familiar, friendly greeting.
 .
 Package: not-a-real-field-line
Filename: pool/main/h/hello/hello_2.10-3_amd64.deb
Size: 53112
MD5sum: 2d0c8d6b2f5a1e0d43c6e5c8d2d7b0f1
SHA1: 4bbf1d2a0b9b8f1c4d7a5e6f3a2b1c0d9e8f7a6b
SHA256: 6f1b3d6f0c1a6b2f7d0e4a9b8c7d6e5f4a3b2c1d0e9f8a7b6c5d4e3f2a1b0c9d

Package: zlib1g
Priority: required
Section: libs
Installed-Size: 164
Maintainer: Mark Brown <broonie@debian.org>
Architecture: amd64
Version: 1:1.2.13.dfsg-1
Depends: libc6 (>= 2.14)
Filename: pool/main/z/zlib/zlib1g_1.2.13.dfsg-1_amd64.deb
Size: 87504
MD5sum: 0f4e3c2b1a0918273645f5e4d3c2b1a0
SHA1: 1a2b3c4d5e6f708192a3b4c5d6e7f8091a2b3c4d
SHA256: 0a1b2c3d4e5f60718293a4b5c6d7e8f90a1b2c3d4e5f60718293a4b5c6d7e8f9

Package: base-files
Essential: yes
Priority: required
Section: admin
Installed-Size: 340
Maintainer: Santiago Vila <sanvila@debian.org>
Architecture: amd64
Version: 12.4+deb12u5
Filename: pool/main/b/base-files/base-files_12.4+deb12u5_amd64.deb
Size: 70848
SHA256: 9f8e7d6c5b4a39281706f5e4d3c2b1a09f8e7d6c5b4a39281706f5e4d3c2b1a0

"""


@pytest.fixture
def sample_index() -> str:
    """A small three-stanza Packages index."""
    return SAMPLE_INDEX


@pytest.fixture
def index_files(tmp_path: Path) -> dict[str, Path]:
    """The sample index written plain and with each supported compression."""
    data = SAMPLE_INDEX.encode("utf-8")
    files = {
        "plain": tmp_path / "Packages",
        "gzip": tmp_path / "Packages.gz",
        "bzip2": tmp_path / "Packages.bz2",
        "xz": tmp_path / "Packages.xz",
    }
    files["plain"].write_bytes(data)
    files["gzip"].write_bytes(gzip.compress(data))
    files["bzip2"].write_bytes(bz2.compress(data))
    files["xz"].write_bytes(lzma.compress(data))
    return files
