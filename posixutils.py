# Copyright 2011 James Ascroft-Leigh

# Conversion between the octal (0755) and symbolic (rwxr-xr-x) forms
# of a unix permission mode.  Both forms are parsed into a `Mode`
# holding the 12-bit value, and a `Mode` is rendered back in the
# canonical "<octal>: <symbolic>" form, e.g. "1712: rwx--x-wT".

from modebits import EXEC_SLOT, FIELDS, FILE_MODE_LENGTH, MODE_MAX
from modebits import OCTAL_DIGIT_SIZE, OCTAL_MAX, TRIPLET_MASK, TRIPLET_SIZE
from modebits import S_ISGID, S_ISUID, S_ISVTX, TRIPLETS, field_at
from modeerrors import DigitTooLarge, InvalidModeString, ParseIntError
from modetype import FILE_MODE, OCTAL_NUMERIC, classify
import logging

logger = logging.getLogger(__name__)

# More digits than this could set bits above the special bits.
MAX_OCTAL_DIGITS = 4

### Mode
#
# A value type: two modes with the same integer value are the same
# mode, and a mode equals nothing but another mode.  Construction from
# an integer is trusted and stores the value as given.
class Mode:

    __slots__ = ("_value",)

    def __init__(self, value):
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Mode is immutable: %r" % (name,))

    @property
    def value(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Mode):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def __str__(self):
        return format_mode(self)

    def __repr__(self):
        return "Mode(0o%o)" % (self._value,)

    def is_set(self, mask):
        return self._value & mask > 0

    def is_suid(self):
        return self.is_set(S_ISUID)

    def is_sgid(self):
        return self.is_set(S_ISGID)

    def is_sticky(self):
        return self.is_set(S_ISVTX)

    def is_exec(self, mask):
        return self.is_set(mask)


### Parsing
#
# Octal digits are read least significant first so that the last
# character always lands in the "other" bits and a fourth, leading
# digit lands in the special bits.
def _parse_octal_numeric(mode_string):
    if len(mode_string) > MAX_OCTAL_DIGITS:
        raise InvalidModeString(mode_string)
    value = 0
    for i, char in enumerate(reversed(mode_string)):
        try:
            digit = int(char)
        except ValueError as e:
            raise ParseIntError(char, e) from e
        if digit > OCTAL_MAX:
            raise DigitTooLarge(digit)
        value |= digit << (OCTAL_DIGIT_SIZE * i)
    return value

# Symbolic strings are read left to right while the bit index counts
# down from the user read bit to the other execute bit.  Only the
# execute slots may carry a special letter; the classifier has already
# rejected anything else.
def _parse_file_mode(mode_string):
    value = 0
    index = FILE_MODE_LENGTH - 1
    for i, char in enumerate(mode_string):
        _, _, special_bit, _, special = field_at(i)
        if char in "rwx":
            value |= 1 << index
        elif char.lower() == special:
            assert i % TRIPLET_SIZE == EXEC_SLOT, (mode_string, i)
            value |= special_bit
            if char == special:
                value |= 1 << index
        else:
            assert char == "-", (mode_string, i, char)
        index -= 1
    return value

def parse_mode(mode_string, check_reversible=True):
    mode_string = mode_string.strip()
    mode_type = classify(mode_string)
    logger.debug("Classified %r as %s", mode_string, mode_type)
    if mode_type == OCTAL_NUMERIC:
        result = Mode(_parse_octal_numeric(mode_string))
    else:
        assert mode_type == FILE_MODE, (mode_string, mode_type)
        result = Mode(_parse_file_mode(mode_string))
    logger.debug("Parsed %r to %r", mode_string, result)
    if check_reversible:
        octal, symbolic = format_mode(
            result, check_reversible=False).split(": ")
        if mode_type == FILE_MODE:
            assert symbolic == mode_string, (mode_string, symbolic, result)
        else:
            assert int(octal, 8) == int(mode_string, 8), (mode_string,
                                                          octal, result)
    return result


### Formatting
#
# Each field is looked up in the triplet table and, when its special
# bit is set, the execute slot is replaced with s/S (or t/T for the
# sticky bit): lowercase when the execute bit is also set.  The
# overlay only changes the rendering, never the value.
def format_triplet(mode, field):
    _, shift, special_bit, exec_bit, special = field
    triplet = TRIPLETS[(mode.value >> shift) & TRIPLET_MASK]
    if mode.is_set(special_bit):
        letter = special if mode.is_exec(exec_bit) else special.upper()
        triplet = triplet[:EXEC_SLOT] + letter + triplet[EXEC_SLOT + 1:]
    return triplet

def format_symbolic(mode):
    return "".join(format_triplet(mode, field) for field in FIELDS)

def format_mode(mode, check_reversible=True):
    symbolic = format_symbolic(mode)
    result = "%03o: %s" % (mode.value, symbolic)
    if check_reversible and 0 <= mode.value <= MODE_MAX:
        reparsed = parse_mode(symbolic, check_reversible=False)
        assert reparsed == mode, (mode, reparsed, result)
    return result
