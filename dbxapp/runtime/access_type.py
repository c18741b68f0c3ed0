import typing as T
from enum import Enum, unique

from dbxapp.util import checker


@unique
class AccessType(Enum):
    """
    The type of access an app is configured for.
    Values are the literals used in app info JSON files.
    """

    FULL_DROPBOX = 'FullDropbox'
    APP_FOLDER = 'AppFolder'

    @property
    def url_part(self) -> str:
        """Root segment of file paths in API URLs, e.g. /files/<url_part>/..."""
        return _URL_PARTS[self]

    @classmethod
    def from_json_value(cls, value: str) -> 'AccessType | None':
        for member in cls:
            if member.value == value:
                return member
        return None

    @classmethod
    def check_arg(cls, arg_name: str, value: T.Any) -> None:
        checker.check_arg(arg_name, value, cls)

    @classmethod
    def check_arg_or_none(cls, arg_name: str, value: T.Any) -> None:
        checker.check_arg_or_none(arg_name, value, cls)


_URL_PARTS = {
    AccessType.FULL_DROPBOX: 'dropbox',
    AccessType.APP_FOLDER: 'sandbox',
}
