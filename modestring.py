# Copyright 2011 James Ascroft-Leigh

"""\
%prog [options] MODE

Show a permission mode in both octal and symbolic form.  MODE is
either octal (755, 1755) or symbolic (rwxr-xr-x, rwSrwSrwT).  Put
-- before a symbolic MODE that starts with a dash.
"""

from modeerrors import ModeError
from modetype import classify
from posixutils import format_mode, parse_mode
import logging
import optparse
import sys

logger = logging.getLogger(__name__)

def setup_logging(verbose):
    logging.basicConfig(
        stream=sys.stderr,
        format="[%(name)s:%(lineno)s] %(message)s")
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)

def describe_mode(mode_string, show_type=False, check_reversible=True):
    if show_type:
        return classify(mode_string.strip())
    mode = parse_mode(mode_string, check_reversible=check_reversible)
    return format_mode(mode, check_reversible=check_reversible)

def main(argv=None):
    parser = optparse.OptionParser(__doc__)
    parser.add_option("--classify", dest="show_type", action="store_true",
                      default=False,
                      help="print the mode type instead of the mode")
    parser.add_option("--no-check", dest="check_reversible",
                      action="store_false", default=True,
                      help="skip the round trip check")
    parser.add_option("-v", "--verbose", dest="verbose", action="store_true",
                      default=False)
    options, args = parser.parse_args(argv)
    if len(args) == 0:
        parser.error("Missing: MODE")
    mode_string = args.pop(0)
    if len(args) > 0:
        parser.error("Unexpected: %r" % (args,))
    setup_logging(options.verbose)
    try:
        result = describe_mode(mode_string, show_type=options.show_type,
                               check_reversible=options.check_reversible)
    except ModeError as e:
        logger.debug("Rejected %r", mode_string, exc_info=True)
        sys.stderr.write("Error: %s\n" % (e,))
        return 1
    print(result)
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
