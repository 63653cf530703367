import dataclasses
import logging
import typing
from typing import Any, Callable, TypeVar

from .coercion import coerce, resolve_kind
from .errors import FetchError, UnsupportedKindError
from .fields import is_record, ssm_path


logger = logging.getLogger(__name__)

FetchParameter = Callable[[str, bool], str]
R = TypeVar("R")


def populate(record: R, base_path: str, fetch: FetchParameter) -> R:
    """Fill every ``ssm_field`` of a dataclass instance from the parameter store.

    - Walks fields in declaration order, depth first into nested records
    - Nested records share ``base_path``; only leaf fragments extend it
    - Un-annotated scalars are left as they are
    - The first failure aborts the walk and propagates

    The record is mutated in place and returned for convenience.
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise TypeError(f"populate() expects a dataclass instance, got {type(record).__name__}")
    _walk(record, base_path, fetch, prefix="")
    return record


def _walk(record: Any, base_path: str, fetch: FetchParameter, prefix: str) -> None:
    try:
        hints = typing.get_type_hints(type(record))
    except (NameError, TypeError) as e:
        record_name = prefix.rstrip(".") or type(record).__name__
        raise UnsupportedKindError(record_name, f"unresolvable annotations on {type(record).__name__} ({e})") from e
    for field in dataclasses.fields(record):
        field_name = f"{prefix}{field.name}"
        declared = hints.get(field.name, field.type)

        # Record-typed fields are always recursed into, annotated or not
        if is_record(declared):
            nested = getattr(record, field.name)
            if not dataclasses.is_dataclass(nested) or isinstance(nested, type):
                raise UnsupportedKindError(field_name, f"uninitialized {declared.__name__}")
            _walk(nested, base_path, fetch, prefix=f"{field_name}.")
            continue

        fragment = ssm_path(field)
        if fragment is None:
            continue
        _resolve_field(record, field, field_name, declared, f"{base_path}{fragment}", fetch)


def _resolve_field(
    record: Any,
    field: dataclasses.Field,
    field_name: str,
    declared: Any,
    parameter_path: str,
    fetch: FetchParameter,
) -> None:
    # Unsupported kinds fail before any network call
    kind = resolve_kind(field_name, declared)

    try:
        raw = fetch(parameter_path, True)
    except Exception as e:
        raise FetchError(field_name, parameter_path, e) from e

    value = coerce(field_name, raw, kind, path=parameter_path)
    setattr(record, field.name, value)
    logger.debug(f"Resolved {field_name} from {parameter_path} as {kind.name}")
