import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Union

from ..core.walker import FetchParameter


logger = logging.getLogger(__name__)


def load_local_parameters(path: Union[str, Path]) -> Dict[str, str]:
    """Read a JSON object of ``{parameter name: value}`` for development runs.

    Non-string scalars are stored as their JSON text so they parse the same way
    a Parameter Store string would.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Local parameters file {path} must contain a JSON object")

    parameters: Dict[str, str] = {}
    for name, value in data.items():
        if isinstance(value, (dict, list)) or value is None:
            raise ValueError(f"Local parameter {name} must be a scalar value")
        parameters[name] = value if isinstance(value, str) else json.dumps(value)
    return parameters


def make_local_fetcher(parameters: Mapping[str, str]) -> FetchParameter:
    def get_parameter(name: str, with_decryption: bool = True) -> str:
        try:
            return parameters[name]
        except KeyError:
            logger.error(f"Local parameter not found: {name}")
            raise KeyError(f"ParameterNotFound: {name}") from None

    return get_parameter
