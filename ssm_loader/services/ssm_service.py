import logging
from functools import partial

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..core.config import Config
from ..core.walker import FetchParameter


logger = logging.getLogger(__name__)


def get_client(config: Config):
    """Create an SSM client from the shared AWS configuration.

    Honors AWS_PROFILE and AWS_REGION from the loaded config; anything unset
    falls back to boto3's usual lookup (env vars, ~/.aws/config, ~/.aws/credentials).
    """
    session = boto3.session.Session(profile_name=config.AWS_PROFILE, region_name=config.AWS_REGION)
    return session.client("ssm")


def get_parameter(client, name: str, with_decryption: bool = True) -> str:
    try:
        response = client.get_parameter(Name=name, WithDecryption=with_decryption)
        return response["Parameter"]["Value"]
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Failed to get SSM parameter {name}: {e}")
        raise


def make_fetcher(client) -> FetchParameter:
    return partial(get_parameter, client)
