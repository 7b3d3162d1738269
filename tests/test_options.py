"""
Unit Tests for Command-Line Option Parsing
"""

import unittest

from pg_check_conn.options import ParsedOptions, ParseError, parse_options, trim


class TestSplitStyle(unittest.TestCase):
    """Test -x value options."""

    def test_database(self):
        result = parse_options(['-d', 'foo'])
        self.assertEqual(result, ParsedOptions(database='foo'))

    def test_all_short_flags(self):
        result = parse_options(['-d', 'app', '-U', 'alice', '-h', 'db.example.com', '-p', '5433', '-t', '10'])
        self.assertEqual(result, ParsedOptions(
            database='app',
            username='alice',
            host='db.example.com',
            port='5433',
            timeout='10'
        ))

    def test_value_looking_like_flag(self):
        """A following token starting with '-' is not a value."""
        result = parse_options(['-d', '-x'])
        self.assertIsInstance(result, ParseError)
        self.assertEqual(result.message, 'missing database argument')

    def test_missing_trailing_value(self):
        result = parse_options(['-p'])
        self.assertEqual(result, ParseError('missing port argument'))

    def test_whitespace_only_value(self):
        result = parse_options(['-U', '   '])
        self.assertEqual(result, ParseError('missing username argument'))

    def test_empty_value(self):
        result = parse_options(['-h', ''])
        self.assertEqual(result, ParseError('missing hostname argument'))

    def test_value_is_trimmed(self):
        result = parse_options(['-U', ' \talice\n'])
        self.assertEqual(result.username, 'alice')

    def test_leading_dash_checked_before_trim(self):
        result = parse_options(['-d', ' -x'])
        self.assertEqual(result.database, '-x')

    def test_short_flags_are_case_sensitive(self):
        result = parse_options(['-u', 'alice', '-D', 'app'])
        self.assertEqual(result, ParsedOptions())


class TestEqualsStyle(unittest.TestCase):
    """Test --longopt=value options."""

    def test_database(self):
        result = parse_options(['--dbname=foo'])
        self.assertEqual(result, ParsedOptions(database='foo'))

    def test_all_long_options(self):
        result = parse_options([
            '--dbname=app',
            '--username=alice',
            '--hostname=db.example.com',
            '--hostaddr=10.0.0.5',
            '--port=5433',
            '--timeout=3',
        ])
        self.assertEqual(result, ParsedOptions(
            database='app',
            username='alice',
            host='db.example.com',
            host_address='10.0.0.5',
            port='5433',
            timeout='3'
        ))

    def test_empty_value(self):
        self.assertEqual(parse_options(['--dbname=']), ParseError('missing database argument'))

    def test_missing_equals(self):
        self.assertEqual(parse_options(['--hostaddr']), ParseError('missing hostaddr argument'))

    def test_whitespace_value(self):
        self.assertEqual(parse_options(['--timeout=  ']), ParseError('missing timeout argument'))

    def test_value_after_first_equals(self):
        result = parse_options(['--dbname= a=b '])
        self.assertEqual(result.database, 'a=b')

    def test_prefix_match(self):
        """Any token sharing a long prefix is routed to that option."""
        result = parse_options(['--portnumber=6543'])
        self.assertEqual(result.port, '6543')

    def test_split_value_not_accepted_for_long_form(self):
        result = parse_options(['--dbname', 'app'])
        self.assertEqual(result, ParseError('missing database argument'))


class TestParsing(unittest.TestCase):
    """Test whole-command-line behaviour."""

    def test_no_arguments(self):
        self.assertEqual(parse_options([]), ParsedOptions())

    def test_last_write_wins(self):
        result = parse_options(['-d', 'a', '-d', 'b'])
        self.assertEqual(result.database, 'b')

        result = parse_options(['--dbname=a', '-d', 'b', '--dbname=c'])
        self.assertEqual(result.database, 'c')

    def test_unrecognized_flags_ignored(self):
        result = parse_options(['--bogus', '-d', 'app', '-q', '--quiet', '-U', 'alice'])
        self.assertEqual(result, ParsedOptions(database='app', username='alice'))

    def test_first_error_aborts(self):
        result = parse_options(['-d', 'app', '-U', '-p', '5432'])
        self.assertEqual(result, ParseError('missing username argument'))

    def test_host_and_hostaddr_together(self):
        result = parse_options(['--hostaddr=10.0.0.5', '-h', 'db.example.com'])
        self.assertEqual(result.host_address, '10.0.0.5')
        self.assertEqual(result.host, 'db.example.com')


class TestTrim(unittest.TestCase):

    def test_ascii_whitespace(self):
        self.assertEqual(trim(' \t\n\r\f\vvalue \t\n\r\f\v'), 'value')

    def test_inner_whitespace_kept(self):
        self.assertEqual(trim('  my db  '), 'my db')


if __name__ == '__main__':
    unittest.main()
