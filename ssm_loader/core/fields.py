import dataclasses
from typing import Any, NewType, Optional


SSM_METADATA_KEY = "ssm"

Int8 = NewType("Int8", int)
Int16 = NewType("Int16", int)
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)
Float32 = NewType("Float32", float)
Float64 = NewType("Float64", float)


def ssm_field(path: str, *, default: Any = dataclasses.MISSING, default_factory: Any = dataclasses.MISSING, **kwargs):
    """Declare a dataclass field resolved from the parameter store.

    ``path`` is appended to the loader's base path to form the parameter name.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("ssm path fragment must be a non-empty string")
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[SSM_METADATA_KEY] = path
    return dataclasses.field(default=default, default_factory=default_factory, metadata=metadata, **kwargs)


def ssm_path(field: dataclasses.Field) -> Optional[str]:
    return field.metadata.get(SSM_METADATA_KEY)


def is_record(tp: Any) -> bool:
    return isinstance(tp, type) and dataclasses.is_dataclass(tp)
