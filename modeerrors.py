# Copyright 2011 James Ascroft-Leigh

### Mode errors
#
# Parsing a mode string is a validate-then-transform pipeline with no
# partial success.  Every failure is one of the exceptions below and
# is raised straight back to the caller.  Catch `ModeError` to handle
# them all.

class ModeError(Exception):
    pass


class InvalidModeString(ModeError):

    def __init__(self, mode_string):
        ModeError.__init__(self, "Invalid mode string: %r" % (mode_string,))
        self.mode_string = mode_string


class DigitTooLarge(ModeError):

    def __init__(self, digit):
        ModeError.__init__(self, "Octal digit too large: %r" % (digit,))
        self.digit = digit


class ParseIntError(ModeError):

    def __init__(self, char, underlying):
        ModeError.__init__(self, "Unable to parse digit %r: %s"
                           % (char, underlying))
        self.char = char
        self.underlying = underlying
