import logging
import sys
import time

from .core.config import Config
from .core.errors import PopulateError
from .core.walker import FetchParameter, populate
from .models import Person
from .services.local_store import load_local_parameters, make_local_fetcher
from .services.ssm_service import get_client, make_fetcher


logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )


def build_fetcher(config: Config) -> FetchParameter:
    """Pick the parameter source, using the local JSON file in development."""
    if config.is_development:
        logger.info(f"Development mode: reading parameters from {config.LOCAL_PARAMETERS_FILE}")
        return make_local_fetcher(load_local_parameters(config.LOCAL_PARAMETERS_FILE))
    return make_fetcher(get_client(config))


def run(config: Config, fetch: FetchParameter) -> Person:
    person = Person()
    return populate(person, config.SSM_PATH, fetch)


def main() -> int:
    start_time = time.time()
    config = Config.from_env()

    try:
        config.validate()
    except ValueError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(config.LOG_LEVEL)
    try:
        person = run(config, build_fetcher(config))
    except PopulateError as e:
        logger.error(f"Failed to populate record ({type(e).__name__}): {e}")
        return 1
    except Exception as e:
        logger.error(f"Failed to load configuration: {str(e)} ({type(e).__name__})", exc_info=True)
        return 1

    logger.info(f"Populated record in {time.time() - start_time:.2f}s")
    print("Updated person", person)
    return 0


if __name__ == "__main__":
    sys.exit(main())
