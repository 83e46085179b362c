from dataclasses import dataclass
from enum import Enum
from os import getenv


class FieldKind(str, Enum):
    """Value kinds a recognized field may carry."""

    TEXT = "text"
    INTEGER = "integer"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str
    attribute: str
    kind: FieldKind = FieldKind.TEXT


# fmt: off
FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec("Package", "package"),
    FieldSpec("Priority", "priority"),
    FieldSpec("Section", "section"),
    FieldSpec("Installed-Size", "installed_size", FieldKind.INTEGER),
    FieldSpec("Maintainer", "maintainer"),
    FieldSpec("Architecture", "architecture"),
    FieldSpec("Version", "version"),
    FieldSpec("Depends", "depends"),
    FieldSpec("Filename", "filename"),
    FieldSpec("Size", "size", FieldKind.INTEGER),
    FieldSpec("MD5sum", "md5sum"),
    FieldSpec("SHA1", "sha1"),
    FieldSpec("SHA256", "sha256"),
)
# fmt: on

FIELDS: tuple[str, ...] = tuple(spec.name for spec in FIELD_SPECS)

# lookup used by the line recognizer, keyed on the case-folded field name
FIELDS_BY_FOLDED_NAME: dict[str, FieldSpec] = {spec.name.casefold(): spec for spec in FIELD_SPECS}
FIELDS_BY_NAME: dict[str, FieldSpec] = {spec.name: spec for spec in FIELD_SPECS}

DEFAULT_KEY_FIELD = getenv("DEBINDICES_KEY_FIELD", "Package")
LOG_LEVEL = getenv("DEBINDICES_LOG_LEVEL", "INFO").upper()
INDEX_ENCODING = getenv("DEBINDICES_ENCODING", "utf-8")
