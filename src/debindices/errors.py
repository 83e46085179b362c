"""Exceptions raised while parsing package indices."""


class DebIndicesError(ValueError):
    """Base class for every error the parser raises on its own."""


class UnsupportedKeyFieldError(DebIndicesError):
    """The requested key field is not one of the recognized fields."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"unknown field can't be used as map key: {field}")


class MalformedNumberError(DebIndicesError):
    """An integer field carried a value that is not a base-10 integer."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"malformed numeric field {field}: {value!r}")


class DuplicateKeyError(DebIndicesError):
    """Two stanzas share a key value while duplicates are disallowed."""

    def __init__(self, field: str, key: str):
        self.field = field
        self.key = key
        super().__init__(f"duplicate package for field key {field}: {key}")
