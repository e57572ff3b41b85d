# schem_errors.py
"""
Error kinds raised while turning a schematic file into a Blueprint.

Every error is terminal for the file being decoded. Catch SchematicError to
skip a bad file in a batch, or one of the subclasses to react to a single kind.
"""


class SchematicError(Exception):
    pass


class CorruptArchive(SchematicError):
    """The compressed envelope could not be decompressed (bad magic, truncated stream)."""


class MalformedTagTree(SchematicError):
    """An expected field is missing or has the wrong shape."""


class PaletteIndexOutOfRange(SchematicError):
    """A cell references a palette index (or legacy ID) with no entry."""


class InvalidOrientationCode(SchematicError):
    """A raw state outside the contract of a type-specific orientation rule."""


class SizeInvariantViolation(SchematicError):
    """A decoded coordinate falls outside the declared size."""
