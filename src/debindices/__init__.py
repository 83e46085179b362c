"""debindices: parser for Debian/Ubuntu binary package indices."""

from debindices.compression import Compression, detect_compression, open_index, parse_file, wrap_stream
from debindices.constants import FIELD_SPECS, FIELDS, FieldKind, FieldSpec
from debindices.errors import DebIndicesError, DuplicateKeyError, MalformedNumberError, UnsupportedKeyFieldError
from debindices.models import Package
from debindices.parser import iter_stanzas, parse, recognize_line

__all__ = [
    "Compression",
    "DebIndicesError",
    "DuplicateKeyError",
    "FIELDS",
    "FIELD_SPECS",
    "FieldKind",
    "FieldSpec",
    "MalformedNumberError",
    "Package",
    "UnsupportedKeyFieldError",
    "detect_compression",
    "iter_stanzas",
    "open_index",
    "parse",
    "parse_file",
    "recognize_line",
    "wrap_stream",
]
