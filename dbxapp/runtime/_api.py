from .access_type import AccessType
from .app_info import (
    AppInfo,
    RawAppInfo,
    load_from_json,
    load_from_json_file,
    load_from_json_file_with_raw,
)
from .errors import (
    AppInfoFileNotFound,
    AppInfoInvalidAccessType,
    AppInfoInvalidField,
    AppInfoLoadError,
    AppInfoMissingField,
    AppInfoNotAnObject,
    AppInfoParseError,
    AppInfoWrongType,
    InvalidArgument,
)
from .host import Host
from .token import check_key_arg, check_secret_arg, get_token_part_error

__all__ = [
    'AccessType',
    'AppInfo',
    'RawAppInfo',
    'load_from_json',
    'load_from_json_file',
    'load_from_json_file_with_raw',
    'AppInfoFileNotFound',
    'AppInfoInvalidAccessType',
    'AppInfoInvalidField',
    'AppInfoLoadError',
    'AppInfoMissingField',
    'AppInfoNotAnObject',
    'AppInfoParseError',
    'AppInfoWrongType',
    'InvalidArgument',
    'Host',
    'check_key_arg',
    'check_secret_arg',
    'get_token_part_error',
]
