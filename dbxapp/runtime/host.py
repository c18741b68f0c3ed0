import typing as T

import attr

from dbxapp.runtime.errors import InvalidArgument
from dbxapp.util import checker

DEFAULT_API_HOST = 'api.dropbox.com'
DEFAULT_CONTENT_HOST = 'api-content.dropbox.com'
DEFAULT_WEB_HOST = 'www.dropbox.com'


def _check_host_name(_instance: T.Any, attribute: attr.Attribute, value: T.Any) -> None:
    checker.check_arg(attribute.name, value, str)
    if not value:
        raise InvalidArgument(f"Bad '{attribute.name}': can't be empty")


@attr.define(frozen=True)
class Host:
    """
    The set of servers an app talks to.
    """

    api: str = attr.ib(validator=_check_host_name)
    """
    Host for API calls (metadata, account info, OAuth).
    """
    content: str = attr.ib(validator=_check_host_name)
    """
    Host for file content uploads and downloads.
    """
    web: str = attr.ib(validator=_check_host_name)
    """
    Host for pages the user visits in a browser (authorization).
    """

    @classmethod
    def default(cls) -> 'Host':
        """The production Dropbox servers."""
        return cls(DEFAULT_API_HOST, DEFAULT_CONTENT_HOST, DEFAULT_WEB_HOST)

    @classmethod
    def from_base(cls, base: str) -> 'Host':
        """Derive all three hosts from a domain suffix like "dropbox.com"."""
        return cls(f'api-{base}', f'api-content-{base}', f'meta-{base}')

    @classmethod
    def check_arg(cls, arg_name: str, value: T.Any) -> None:
        checker.check_arg(arg_name, value, cls)

    @classmethod
    def check_arg_or_none(cls, arg_name: str, value: T.Any) -> None:
        checker.check_arg_or_none(arg_name, value, cls)
