"""
App credentials and server configuration, and loading them from JSON.
"""

import json
import logging
import typing as T
from collections.abc import Mapping
from pathlib import Path

import attr

from dbxapp.runtime.access_type import AccessType
from dbxapp.runtime.errors import (
    AppInfoFileNotFound,
    AppInfoInvalidAccessType,
    AppInfoInvalidField,
    AppInfoMissingField,
    AppInfoNotAnObject,
    AppInfoParseError,
    AppInfoWrongType,
)
from dbxapp.runtime.host import Host
from dbxapp.runtime.token import (
    check_key_arg,
    check_secret_arg,
    get_token_part_error,
)
from dbxapp.util import checker
from dbxapp.util.json_doc import DocFieldError, structure_doc

log = logging.getLogger(__name__)


def _check_key(_instance: T.Any, _attribute: attr.Attribute, value: T.Any) -> None:
    check_key_arg(value)


def _check_secret(_instance: T.Any, _attribute: attr.Attribute, value: T.Any) -> None:
    check_secret_arg(value)


def _check_access_type(
    _instance: T.Any, attribute: attr.Attribute, value: T.Any
) -> None:
    AccessType.check_arg(attribute.name, value)


def _check_host(_instance: T.Any, attribute: attr.Attribute, value: T.Any) -> None:
    Host.check_arg(attribute.name, value)


@attr.define(frozen=True)
class AppInfo:
    key: str = attr.ib(validator=_check_key)
    """
    The app key (OAuth calls this the consumer key).
    Apps are registered on the Dropbox developer website.
    """
    secret: str = attr.ib(repr=False, validator=_check_secret)
    """
    The app secret (OAuth calls this the consumer secret).
    Anyone holding it can impersonate the app, so never log or share it.
    """
    access_type: AccessType = attr.ib(validator=_check_access_type)
    """
    The type of access the app is configured for.
    """
    host: Host = attr.ib(
        default=None,
        converter=attr.converters.default_if_none(factory=Host.default),
        validator=_check_host,
    )
    """
    The set of servers the app will use.
    """

    @classmethod
    def check_arg(cls, arg_name: str, value: T.Any) -> None:
        checker.check_arg(arg_name, value, cls)

    @classmethod
    def check_arg_or_none(cls, arg_name: str, value: T.Any) -> None:
        checker.check_arg_or_none(arg_name, value, cls)


@attr.define(frozen=True)
class AppInfoDoc:
    """
    Required fields of an app info JSON file, in the order they are checked.
    """

    key: str = attr.ib()
    secret: str = attr.ib()
    access_type: str = attr.ib()


@attr.define(frozen=True)
class HostDoc:
    host: str | None = attr.ib(default=None)
    """
    Domain suffix the api-, api-content- and meta- hosts are derived from.
    """


class RawAppInfo(T.NamedTuple):
    raw: T.Any
    """
    The decoded JSON, including any fields AppInfo doesn't use.
    """
    app_info: AppInfo


_TOKEN_FIELD_DESCRIPTIONS = {
    'key': 'app key',
    'secret': 'app secret',
}


def load_from_json(json_obj: T.Any) -> AppInfo:
    """
    Build an AppInfo from a decoded JSON object.
    The object must have string fields "key", "secret" and "access_type",
    and may have a string field "host". Other fields are ignored.
    """
    if not isinstance(json_obj, Mapping):
        raise AppInfoNotAnObject()

    try:
        doc = structure_doc(json_obj, AppInfoDoc)
    except DocFieldError as e:
        log.debug(f'Rejecting app info: {e}')
        if e.missing:
            raise AppInfoMissingField(e.field) from e
        raise AppInfoWrongType(e.field) from e

    for field, description in _TOKEN_FIELD_DESCRIPTIONS.items():
        token_error = get_token_part_error(getattr(doc, field))
        if token_error is not None:
            # The detail can quote a character of the secret
            log.debug(f'Rejecting app info: bad token syntax in "{field}"')
            raise AppInfoInvalidField(field, description, token_error)

    access_type = AccessType.from_json_value(doc.access_type)
    if access_type is None:
        log.debug(f'Rejecting app info: unknown access_type {doc.access_type!r}')
        raise AppInfoInvalidAccessType(doc.access_type)

    try:
        host_doc = structure_doc(json_obj, HostDoc)
    except DocFieldError as e:
        log.debug(f'Rejecting app info: {e}')
        raise AppInfoWrongType(e.field, optional=True) from e

    if host_doc.host is None:
        host = Host.default()
    else:
        host = Host.from_base(host_doc.host)

    return AppInfo(doc.key, doc.secret, access_type, host)


def load_from_json_file_with_raw(path: str | Path) -> RawAppInfo:
    """
    Load a JSON file describing an app.
    Returns both the decoded JSON and the AppInfo parsed from it, for callers
    that keep their own extra fields in the same file.
    """
    path = Path(path)
    log.debug(f'Loading app info from {path}')
    try:
        text = path.read_text(encoding='utf-8')
    except FileNotFoundError as e:
        log.debug(f'App info file not found: {path}')
        raise AppInfoFileNotFound(path) from e
    except (OSError, UnicodeDecodeError) as e:
        # Directories and unreadable files end up here too
        log.debug(f'Could not read app info from {path}: {e}')
        raise AppInfoParseError(path, str(e)) from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        log.debug(f'Bad JSON in {path}: {e}')
        raise AppInfoParseError(path, e.msg) from e
    if raw is None:
        log.debug(f'Bad JSON in {path}: document is null')
        raise AppInfoParseError(path, 'document is null')

    app_info = load_from_json(raw)
    log.debug(
        f'Loaded app info from {path}: access_type={app_info.access_type.value}, '
        f'api host={app_info.host.api}'
    )
    return RawAppInfo(raw, app_info)


def load_from_json_file(path: str | Path) -> AppInfo:
    """
    Load a JSON file describing an app.
    At a minimum the file must include the key, secret and access_type fields.
    """
    return load_from_json_file_with_raw(path).app_info
