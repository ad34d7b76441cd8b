# Copyright 2011 James Ascroft-Leigh

# The 12-bit permission layout shared by the parsing and formatting
# directions.  Nothing outside this module should need to know a shift
# amount or a mask value.

S_ISUID = int("04000", 8)
S_ISGID = int("02000", 8)
S_ISVTX = int("01000", 8)
S_IXUSR = int("00100", 8)
S_IXGRP = int("00010", 8)
S_IXOTH = int("00001", 8)

# Largest value any parsed mode string can produce.
MODE_MAX = int("07777", 8)

OCTAL_DIGITS = "01234567"
OCTAL_DIGIT_SIZE = 3
OCTAL_MAX = 7

### Triplets
#
# The canonical rendering of a single 3-bit field, indexed by the
# field's value.
TRIPLETS = (
    "---",
    "--x",
    "-w-",
    "-wx",
    "r--",
    "r-x",
    "rw-",
    "rwx",
    )
TRIPLET_MASK = 7
TRIPLET_SIZE = 3

# Position of the execute slot inside a triplet.
EXEC_SLOT = 2

### Fields
#
# One entry per triplet in display order: name, shift of the triplet,
# the special bit overlaid on its execute slot, the execute bit itself
# and the lowercase letter used for that overlay.
FIELDS = (
    ("user", 6, S_ISUID, S_IXUSR, "s"),
    ("group", 3, S_ISGID, S_IXGRP, "s"),
    ("other", 0, S_ISVTX, S_IXOTH, "t"),
    )

FILE_MODE_LENGTH = len(FIELDS) * TRIPLET_SIZE

# Characters allowed in the read and write slots of any triplet.
NORMAL_CHARS = "-rw"


def exec_slot_chars(special):
    return "-x" + special + special.upper()


def field_at(position):
    return FIELDS[position // TRIPLET_SIZE]


def allowed_chars(position):
    if position % TRIPLET_SIZE == EXEC_SLOT:
        return exec_slot_chars(field_at(position)[4])
    return NORMAL_CHARS


FILE_MODE_CHARS = "".join(sorted(set(
    "".join(allowed_chars(i) for i in range(FILE_MODE_LENGTH)))))
