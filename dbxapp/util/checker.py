"""
Argument type assertions shared by the value types.
"""

import typing as T

from dbxapp.runtime.errors import InvalidArgument


def throw_error(arg_name: str, value: T.Any, expected_type: type) -> T.NoReturn:
    raise InvalidArgument(
        f"Expecting '{arg_name}' to have value of type "
        f"'{expected_type.__name__}', but got {type(value).__name__}"
    )


def check_arg(arg_name: str, value: T.Any, expected_type: type) -> None:
    if not isinstance(value, expected_type):
        throw_error(arg_name, value, expected_type)


def check_arg_or_none(arg_name: str, value: T.Any, expected_type: type) -> None:
    if value is None:
        return
    check_arg(arg_name, value, expected_type)
