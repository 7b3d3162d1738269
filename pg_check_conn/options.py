"""
Command-Line Options Module
Parses the pg_isready-compatible option set into connection parameters.

Both ``-x value`` and ``--longopt=value`` forms are accepted. Unknown tokens
are ignored so the probe stays a drop-in for existing pg_isready invocations.
"""

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Sequence, Union

WHITESPACE = ' \t\n\r\f\v'


class OptionDef(NamedTuple):
    """A recognized option: short flag, long prefix, target field and display name."""
    short: Optional[str]
    long_prefix: str
    field: str
    name: str


# Checked in order for every token
OPTION_DEFS: List[OptionDef] = [
    OptionDef('-d', '--dbname', 'database', 'database'),
    OptionDef('-U', '--username', 'username', 'username'),
    OptionDef('-h', '--hostname', 'host', 'hostname'),
    OptionDef(None, '--hostaddr', 'host_address', 'hostaddr'),
    OptionDef('-p', '--port', 'port', 'port'),
    OptionDef('-t', '--timeout', 'timeout', 'timeout'),
]


@dataclass(frozen=True)
class ParsedOptions:
    """Connection parameters taken from the command line. Absent fields are None."""
    database: Optional[str] = None
    username: Optional[str] = None
    host: Optional[str] = None
    host_address: Optional[str] = None
    port: Optional[str] = None
    timeout: Optional[str] = None


@dataclass(frozen=True)
class ParseError:
    """A recognized option was given without a usable value."""
    message: str


def trim(value: str) -> str:
    """Strip ASCII whitespace from both ends."""
    return value.strip(WHITESPACE)


def _missing(option: OptionDef) -> ParseError:
    return ParseError(f"missing {option.name} argument")


def _next_value(tokens: Sequence[str], index: int) -> Optional[str]:
    """Value for a split-style flag at ``index``, or None if there is none."""
    if index + 1 < len(tokens) and not tokens[index + 1].startswith('-'):
        value = trim(tokens[index + 1])
        if value:
            return value
    return None


def _equals_value(token: str) -> Optional[str]:
    """Value after the first '=' of an equals-style token, or None if there is none."""
    _, sep, rest = token.partition('=')
    if sep:
        value = trim(rest)
        if value:
            return value
    return None


def _match(token: str) -> Optional[tuple]:
    """Return (option, split_style) for a recognized token, else None."""
    for option in OPTION_DEFS:
        if option.short is not None and token == option.short:
            return option, True
        if token.startswith(option.long_prefix):
            return option, False
    return None


def parse_options(tokens: Sequence[str]) -> Union[ParsedOptions, ParseError]:
    """
    Parse command-line tokens (without the program name).

    Args:
        tokens: Raw argument list

    Returns:
        ParsedOptions on success, or a ParseError naming the first
        malformed option.
    """
    values: Dict[str, str] = {}

    index = 0
    while index < len(tokens):
        matched = _match(tokens[index])
        if matched is None:
            index += 1
            continue

        option, split_style = matched
        if split_style:
            value = _next_value(tokens, index)
            index += 2
        else:
            value = _equals_value(tokens[index])
            index += 1

        if value is None:
            return _missing(option)

        values[option.field] = value

    return ParsedOptions(**values)
