# Copyright 2011 James Ascroft-Leigh

from modebits import FILE_MODE_CHARS, FILE_MODE_LENGTH, OCTAL_DIGITS
from modebits import allowed_chars
from modeerrors import InvalidModeString

OCTAL_NUMERIC = "octal_numeric"
FILE_MODE = "file_mode"

# 755, 1755 and rwxr-xr-x respectively.
VALID_LENGTHS = (3, 4, FILE_MODE_LENGTH)

### Classify
#
# Decide which of the two grammars a mode string belongs to.  The
# cheap length check runs first, then the character set check, and
# only symbolic strings get the per-position check.  The input must
# already be trimmed.
def classify(mode_string):
    if len(mode_string) not in VALID_LENGTHS:
        raise InvalidModeString(mode_string)
    if all(c in OCTAL_DIGITS for c in mode_string):
        return OCTAL_NUMERIC
    if (len(mode_string) == FILE_MODE_LENGTH
            and all(c in FILE_MODE_CHARS for c in mode_string)):
        for i, c in enumerate(mode_string):
            if c not in allowed_chars(i):
                raise InvalidModeString(mode_string)
        return FILE_MODE
    raise InvalidModeString(mode_string)
