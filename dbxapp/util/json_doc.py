"""
Structure decoded JSON into attrs document classes.
"""

import typing as T

import attr
from cattrs.converters import BaseConverter, Converter
from cattrs.errors import ClassValidationError

D = T.TypeVar('D')


class DocFieldError(Exception):
    """A single field of a JSON document is missing or has the wrong type."""

    def __init__(self, field: str, missing: bool) -> None:
        self.field = field
        self.missing = missing
        problem = 'missing' if missing else 'wrong type'
        super().__init__(f'{field}: {problem}')


def _structure_str(v: T.Any, _: type) -> str:
    if not isinstance(v, str):
        raise TypeError(f'expected a string, got {type(v).__name__}')
    return v


def make_json_doc_converter() -> BaseConverter:
    # Unknown keys are left for the caller to read from the raw document.
    converter = Converter(forbid_extra_keys=False, detailed_validation=True)

    # Strings must already be strings; no str(42) coercion
    converter.register_structure_hook(str, _structure_str)

    return converter


json_doc_converter = make_json_doc_converter()


def structure_doc(data: T.Mapping[str, T.Any], doc_cls: type[D]) -> D:
    """
    Structure `data` into `doc_cls`.
    Keys whose value is None count as absent.
    On failure, raise DocFieldError for the first bad field in declaration order.
    """
    present = {k: v for k, v in data.items() if v is not None}
    try:
        return json_doc_converter.structure(present, doc_cls)
    except ClassValidationError as exc:
        with_notes, _ = exc.group_exceptions()
        failed = {note.name: err for err, note in with_notes}
        for field in attr.fields(doc_cls):
            err = failed.get(field.name)
            if isinstance(err, KeyError):
                raise DocFieldError(field.name, missing=True) from exc
            if isinstance(err, TypeError):
                raise DocFieldError(field.name, missing=False) from exc
        raise
