"""Line-oriented parser for Debian binary package indices (``Packages`` files)."""

import logging
import re
from collections.abc import Iterable, Iterator
from typing import Any, NamedTuple

from debindices.constants import FIELDS_BY_FOLDED_NAME, FIELDS_BY_NAME, FieldKind, FieldSpec
from debindices.errors import DuplicateKeyError, MalformedNumberError, UnsupportedKeyFieldError
from debindices.models import Package

logger = logging.getLogger(__name__)

SEPARATOR = ": "
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class FieldMatch(NamedTuple):
    spec: FieldSpec
    value: str | int
    raw: str


def recognize_line(line: str) -> FieldMatch | None:
    """Match a single index line against the recognized fields.

    Args:
        line: One physical line with its line terminator already removed.

    Returns:
        The matching field, its converted value and the raw value text, or None
        if the line is not a recognized ``Field: value`` assignment.

    Raises:
        MalformedNumberError: An integer field's value is not a base-10 integer
            that fits in 64 bits.
    """
    name, sep, value = line.partition(SEPARATOR)
    if not sep or not value:
        return None
    spec = FIELDS_BY_FOLDED_NAME.get(name.casefold())
    if spec is None:
        return None
    if spec.kind is FieldKind.INTEGER:
        if not _INTEGER_RE.fullmatch(value):
            raise MalformedNumberError(spec.name, value)
        number = int(value)
        if not INT64_MIN <= number <= INT64_MAX:
            raise MalformedNumberError(spec.name, value)
        return FieldMatch(spec, number, value)
    return FieldMatch(spec, value, value)


class StanzaAccumulator:
    """Collects field values for the stanza currently being scanned."""

    def __init__(self, key_field: str):
        self.key_field = key_field
        self._values: dict[str, Any] = {}
        self._key = ""
        self._pending = False

    @property
    def pending(self) -> bool:
        """Whether the current stanza has seen any non-blank line."""
        return self._pending

    def touch(self) -> None:
        self._pending = True

    def feed(self, match: FieldMatch) -> None:
        """Store a recognized value, remembering its raw text if it is the key field."""
        self._pending = True
        self._values[match.spec.attribute] = match.value
        if match.spec.name == self.key_field:
            self._key = match.raw

    def commit(self) -> tuple[str, Package]:
        """Build the record for the current stanza and reset for the next one."""
        record = Package(**self._values)
        key = self._key
        self._values = {}
        self._key = ""
        self._pending = False
        return key, record


def _check_key_field(key_field: str) -> None:
    if key_field not in FIELDS_BY_NAME:
        raise UnsupportedKeyFieldError(key_field)


def iter_stanzas(stream: Iterable[str], key_field: str = "Package") -> Iterator[tuple[str, Package]]:
    """Yield ``(key, record)`` for every stanza in ``stream``, in input order.

    Blank (empty, or only spaces and tabs) lines end a stanza; runs of them do not
    produce empty records. The end of the stream also ends the last stanza.
    Continuation lines and unrecognized fields are skipped.
    """
    _check_key_field(key_field)
    acc = StanzaAccumulator(key_field)

    for line in stream:
        line = line.rstrip("\r\n")
        if not line.strip(" \t"):
            if acc.pending:
                yield acc.commit()
            continue

        if match := recognize_line(line):
            acc.feed(match)
        else:
            acc.touch()

    if acc.pending:
        yield acc.commit()


def parse(
    stream: Iterable[str],
    key_field: str = "Package",
    fail_on_duplicate: bool = False,
) -> dict[str, Package]:
    """Parse a Packages index into records keyed by ``key_field``.

    Args:
        stream: Text lines of the index, e.g. a file opened in text mode
        key_field: Canonical name of the field whose value keys the result
        fail_on_duplicate: Raise on a repeated key instead of keeping the last record

    Returns:
        Mapping of key field value to its Package record

    Raises:
        UnsupportedKeyFieldError: ``key_field`` is not a recognized field
        MalformedNumberError: An integer field holds a non-integer value
        DuplicateKeyError: A key repeats while ``fail_on_duplicate`` is set
    """
    _check_key_field(key_field)

    packages: dict[str, Package] = {}
    stanzas = 0
    overwritten = 0
    for key, record in iter_stanzas(stream, key_field):
        stanzas += 1
        if key in packages:
            if fail_on_duplicate:
                raise DuplicateKeyError(key_field, key)
            overwritten += 1
            logger.debug(f"Replacing earlier record for {key_field} {key!r}")
        packages[key] = record

    logger.debug(
        "Parsed %d stanzas into %d records keyed by %s (%d overwritten)",
        stanzas,
        len(packages),
        key_field,
        overwritten,
    )
    return packages
