from .local_store import load_local_parameters, make_local_fetcher
from .ssm_service import get_client, get_parameter, make_fetcher
