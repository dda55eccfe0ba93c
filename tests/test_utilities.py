"""
# pcresub: test_utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `utilities.py`.
"""

import unittest

from pcresub.utilities import extract_substring, is_ascii_digit, is_hex_digit


class TestUtilities(unittest.TestCase):
    def test_is_ascii_digit(self):
        self.assertTrue(is_ascii_digit('0'))
        self.assertTrue(is_ascii_digit('9'))
        self.assertFalse(is_ascii_digit('a'))
        self.assertFalse(is_ascii_digit('٣'))

    def test_is_hex_digit(self):
        self.assertTrue(is_hex_digit('0'))
        self.assertTrue(is_hex_digit('a'))
        self.assertTrue(is_hex_digit('F'))
        self.assertFalse(is_hex_digit('g'))
        self.assertFalse(is_hex_digit('}'))
        self.assertFalse(is_hex_digit('１'))

    def test_extract_substring(self):
        self.assertEqual(extract_substring('Hello World', 0, 5), 'Hello')
        self.assertEqual(extract_substring('Hello World', 6, 11), 'World')
        self.assertEqual(extract_substring('Hello World', 3, 3), '')
        self.assertEqual(extract_substring('Hello World', -1, -1), '')
        self.assertEqual(extract_substring('Hello World', 5, 2), '')


if __name__ == '__main__':
    unittest.main()
