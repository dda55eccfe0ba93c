"""
# pcresub: test_regexes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `regexes.py`.
"""

import re
import unittest

from pcresub.exceptions import InvalidRegexException
from pcresub.regexes import PythonRegex


class TestRegexes(unittest.TestCase):
    def test_python_regex_validity(self):
        regex = PythonRegex(r'(?P<word>\w+)')
        self.assertTrue(regex.is_valid)
        self.assertIsNone(regex.error_message)
        self.assertEqual(regex.pattern, r'(?P<word>\w+)')
        self.assertEqual(regex.flags, 0)

        invalid_regex = PythonRegex(r'(unclosed')
        self.assertFalse(invalid_regex.is_valid)
        self.assertTrue(invalid_regex.error_message.startswith('invalid regex `(unclosed`: '))
        self.assertEqual(invalid_regex.get_capture_group_number('anything'), -1)

    def test_python_regex_get_capture_group_number(self):
        regex = PythonRegex(r'(?P<first>\w+) (\w+) (?P<third>\w+)')
        self.assertEqual(regex.get_capture_group_number('first'), 1)
        self.assertEqual(regex.get_capture_group_number('third'), 3)
        self.assertEqual(regex.get_capture_group_number('second'), -1)

    def test_python_regex_compute_capture_spans(self):
        match = re.search(r'(\w+) (x)?(\w+)', 'Hello World')
        self.assertEqual(PythonRegex.compute_capture_spans(match), [(0, 11), (0, 5), (-1, -1), (6, 11)])

    def test_python_regex_expand(self):
        regex = PythonRegex(r'(?P<first>\w+) (?P<last>\w+)')
        match = re.match(r'(?P<first>\w+) (?P<last>\w+)', 'ada lovelace')
        self.assertEqual(regex.expand(match, r'\u\g{last}, \U\g<first>\E!'), 'Lovelace, ADA!')

        invalid_regex = PythonRegex(r'[')
        with self.assertRaises(InvalidRegexException) as context:
            invalid_regex.expand(match, r'\1')
        self.assertEqual(context.exception.error_message, invalid_regex.error_message)

    def test_python_regex_substitute(self):
        regex = PythonRegex(r'(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})')
        self.assertEqual(
            regex.substitute('from 2024-10-19 to 2025-01-02', r'\g{day}/\g{month}/\g{year}'),
            'from 19/10/2024 to 02/01/2025',
        )
        self.assertEqual(
            regex.substitute('from 2024-10-19 to 2025-01-02', r'[\0]', count=1),
            'from [2024-10-19] to 2025-01-02',
        )
        self.assertEqual(regex.substitute('no dates here', r'\0'), 'no dates here')

        self.assertEqual(PythonRegex(r'\w+').substitute('one two', r'\u\0'), 'One Two')
        self.assertEqual(PythonRegex(r'o').substitute('foo', r'\x{01F600}'), 'f\U0001f600\U0001f600')
        self.assertEqual(PythonRegex(r'o').substitute('foo', r'$1\q'), r'f$1\q$1\q')
        self.assertEqual(PythonRegex(r'(a)|(b)').substitute('ab', r'[\1\2]'), '[a][b]')
        self.assertEqual(PythonRegex(r'word', re.IGNORECASE).substitute('WORD', 'x'), 'x')

    def test_python_regex_substitute_with_count(self):
        regex = PythonRegex(r'o')
        self.assertEqual(regex.substitute_with_count('foo boo', '0'), ('f00 b00', 4))
        self.assertEqual(regex.substitute_with_count('foo boo', '0', count=3), ('f00 b0o', 3))
        self.assertEqual(regex.substitute_with_count('bar', '0'), ('bar', 0))

        self.assertRaises(InvalidRegexException, PythonRegex(r'*').substitute_with_count, 'foo', '0')
        self.assertRaises(InvalidRegexException, PythonRegex(r'*').substitute, 'foo', '0')


if __name__ == '__main__':
    unittest.main()
