"""Exceptions raised while building or loading app credentials."""

from pathlib import Path


class InvalidArgument(ValueError):
    """Raised when a constructor or check_arg helper is given a bad value."""


class AppInfoLoadError(Exception):
    """Base class for errors loading app info from JSON."""


class AppInfoFileNotFound(AppInfoLoadError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'File doesn\'t exist: "{path}"')


class AppInfoParseError(AppInfoLoadError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f'JSON parse error: "{path}"')


class AppInfoNotAnObject(AppInfoLoadError):
    def __init__(self) -> None:
        super().__init__('Expecting JSON object, got something else')


class AppInfoMissingField(AppInfoLoadError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f'Missing field "{field}"')


class AppInfoWrongType(AppInfoLoadError):
    def __init__(self, field: str, optional: bool = False) -> None:
        self.field = field
        if optional:
            message = f'Optional field "{field}" must be a string'
        else:
            message = f'Expecting field "{field}" to be a string'
        super().__init__(message)


class AppInfoInvalidField(AppInfoLoadError):
    """A key or secret that fails the token syntax check."""

    def __init__(self, field: str, description: str, detail: str) -> None:
        self.field = field
        self.detail = detail
        super().__init__(
            f'Field "{field}" doesn\'t look like a valid {description}: {detail}'
        )


class AppInfoInvalidAccessType(AppInfoLoadError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            'Field "access_type" must be either "FullDropbox" or "AppFolder"'
        )
