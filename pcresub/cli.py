"""
# pcresub: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import re
import sys
from typing import Optional

from pcresub._version import __version__
from pcresub.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    GENERIC_ERROR_EXIT_CODE,
    VERBOSE_MODE_DIVIDER_SYMBOL_COUNT,
)
from pcresub.regexes import PythonRegex

DESCRIPTION = '''
    Substitute regex matches using PCRE replacement syntax,
    writing the result to standard output.
'''
PATTERN_HELP = '''
    regex to search for (Python `re` syntax)
'''
REPLACEMENT_HELP = r'''
    replacement pattern (supports \0 to \9, \g{name}, \g<name>, \xhh, \x{hhhh}, \l, \u, \L, \U, \E)
'''
FILE_NAME_HELP = '''
    name of file to be read (standard input if omitted)
'''
IGNORE_CASE_HELP = '''
    match case-insensitively
'''
MULTILINE_HELP = '''
    make `^` and `$` match at line boundaries
'''
DOTALL_HELP = '''
    make `.` match newlines
'''
COUNT_HELP = '''
    maximum number of replacements per input (default 0, meaning all)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every input before and after substitution to standard error)
'''


def compute_regex_flags(ignore_case_enabled: bool, multiline_enabled: bool, dotall_enabled: bool) -> int:
    flags = 0

    if ignore_case_enabled:
        flags |= re.IGNORECASE
    if multiline_enabled:
        flags |= re.MULTILINE
    if dotall_enabled:
        flags |= re.DOTALL

    return flags


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(prog='pcresub', description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-i', '--ignore-case',
        dest='ignore_case_enabled',
        action='store_true',
        help=IGNORE_CASE_HELP,
    )
    argument_parser.add_argument(
        '-m', '--multiline',
        dest='multiline_enabled',
        action='store_true',
        help=MULTILINE_HELP,
    )
    argument_parser.add_argument(
        '-s', '--dotall',
        dest='dotall_enabled',
        action='store_true',
        help=DOTALL_HELP,
    )
    argument_parser.add_argument(
        '-n', '--count',
        dest='count',
        default=0,
        type=int,
        help=COUNT_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'pattern',
        help=PATTERN_HELP,
    )
    argument_parser.add_argument(
        'replacement_pattern',
        help=REPLACEMENT_HELP,
        metavar='replacement',
    )
    argument_parser.add_argument(
        'file_names',
        default=[],
        help=FILE_NAME_HELP,
        metavar='file',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def print_verbose_report(source_name: str, string_before: str, string_after: str, replacement_count: int):
    if replacement_count == 0:
        no_change_indicator = ' (no change)'
    else:
        no_change_indicator = f' ({replacement_count} replaced)'

    try:
        print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE {source_name}', file=sys.stderr)
        print(string_before, file=sys.stderr)
        print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator, file=sys.stderr)
        print(string_after, file=sys.stderr)
        print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER {source_name}', file=sys.stderr)
    except UnicodeEncodeError:
        print('error: cannot encode verbose report for standard error', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def read_input(file_name: str) -> str:
    try:
        with open(file_name, 'r', encoding='utf-8') as input_file:
            return input_file.read()
    except FileNotFoundError:
        print(f'error: argument `{file_name}`: file `{file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def substitute_input(regex: 'PythonRegex', source_name: str, string: str, replacement_pattern: str,
                     count: int, verbose_mode_enabled: bool) -> str:
    substituted_string, replacement_count = regex.substitute_with_count(string, replacement_pattern, count)

    if verbose_mode_enabled:
        print_verbose_report(source_name, string, substituted_string, replacement_count)

    return substituted_string


def write_output(string: str):
    try:
        sys.stdout.write(string)
        sys.stdout.flush()
    except UnicodeEncodeError as unicode_encode_error:
        # lone surrogates from `\x{D800}` to `\x{DFFF}` cannot be encoded
        print(f'error: cannot encode output for standard output: {unicode_encode_error}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except IOError:
        print('error: cannot write to standard output', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    file_names = parsed_arguments.file_names
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled
    count = parsed_arguments.count

    if count < 0:
        print('error: option -n (or --count) cannot be negative', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    flags = compute_regex_flags(
        parsed_arguments.ignore_case_enabled,
        parsed_arguments.multiline_enabled,
        parsed_arguments.dotall_enabled,
    )
    regex = PythonRegex(parsed_arguments.pattern, flags)
    if not regex.is_valid:
        print(f'error: {regex.error_message}', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    if len(file_names) == 0:
        string = sys.stdin.read()
        write_output(
            substitute_input(regex, '<stdin>', string, parsed_arguments.replacement_pattern,
                             count, verbose_mode_enabled)
        )
    else:
        for file_name in file_names:
            string = read_input(file_name)
            write_output(
                substitute_input(regex, file_name, string, parsed_arguments.replacement_pattern,
                                 count, verbose_mode_enabled)
            )


if __name__ == '__main__':
    main()
