"""Record population engine.

Modules in this package are store-agnostic: they walk annotated dataclasses,
coerce raw parameter strings and define the loader's error types. Talking to
an actual parameter store lives in ``ssm_loader.services``.
"""

from .config import Config
from .errors import FetchError, ParseError, PopulateError, UnsupportedKindError
from .fields import Float32, Float64, Int8, Int16, Int32, Int64, ssm_field
from .walker import FetchParameter, populate
