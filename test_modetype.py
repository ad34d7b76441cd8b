# Copyright 2011 James Ascroft-Leigh

from modeerrors import InvalidModeString, ModeError
from modetype import FILE_MODE, OCTAL_NUMERIC, classify
import itertools
import unittest


class TestClassify(unittest.TestCase):

    def test_valid(self):
        cases = [
            ("777", OCTAL_NUMERIC),
            ("000", OCTAL_NUMERIC),
            ("4755", OCTAL_NUMERIC),
            ("0644", OCTAL_NUMERIC),
            ("777777777", OCTAL_NUMERIC),
            ("rwxrwxrwx", FILE_MODE),
            ("rwsrwsrwt", FILE_MODE),
            ("rwSrwSrwT", FILE_MODE),
            ("---------", FILE_MODE),
            ("rw-r--r--", FILE_MODE),
            ("--s--S--t", FILE_MODE),
            ]
        for case, expected in cases:
            self.assertEqual(classify(case), expected, case)

    def test_invalid(self):
        cases = [
            "4758",
            "rwSrwSrwz",
            "swxr-xr-x",
            "rwxrwtrwx",
            "rwxrwxrws",
            "rwxrwxrwS",
            "rtxr-xr-x",
            "xwxr-xr-x",
            "r-xr-xr-t ",
            "rwx",
            "r-x-",
            "89a",
            ]
        for case in cases:
            self.assertRaises(InvalidModeString, classify, case)

    def test_does_not_trim(self):
        self.assertRaises(InvalidModeString, classify, " 755")
        self.assertRaises(InvalidModeString, classify, "755 ")

    def test_other_lengths_rejected(self):
        for length in [0, 1, 2, 5, 6, 7, 8, 10, 12]:
            for char in "7r-":
                self.assertRaises(InvalidModeString, classify, char * length)

    def test_exec_slots(self):
        for user, group, other in itertools.product("-xsS", "-xsS", "-xtT"):
            case = "rw%srw%srw%s" % (user, group, other)
            self.assertEqual(classify(case), FILE_MODE, case)

    def test_error_is_mode_error(self):
        try:
            classify("rwSrwSrwz")
        except ModeError as e:
            self.assertEqual(e.mode_string, "rwSrwSrwz")
            self.assertIn("rwSrwSrwz", str(e))
        else:
            self.fail("Expected ModeError")

if __name__ == "__main__":
    unittest.main()
