"""
Syntax rule for the parts of an OAuth token (app key and app secret).
"""

from dbxapp.runtime.errors import InvalidArgument
from dbxapp.util import checker


def get_token_part_error(s: str | None) -> str | None:
    """
    Return a description of what is wrong with `s`, or None if it is a
    well-formed token part.
    A token part is a non-empty run of printable, non-space ASCII characters.
    """
    if s is None:
        return "can't be None"
    if len(s) == 0:
        return "can't be empty"
    for i, c in enumerate(s):
        if not '\x21' <= c <= '\x7e':
            return f'bad character at index {i}: {c!r}'
    return None


def _check_token_part_arg(arg_name: str, value: str) -> None:
    checker.check_arg(arg_name, value, str)
    error = get_token_part_error(value)
    if error is not None:
        raise InvalidArgument(f"Bad '{arg_name}': {error}")


def check_key_arg(key: str) -> None:
    _check_token_part_arg('key', key)


def check_secret_arg(secret: str) -> None:
    _check_token_part_arg('secret', secret)
