import os

from block_csi.common.config import config
from block_csi.common.csi_logger import get_stdout_logger
from block_csi.provider.errors import MissingAccessTokenError
from block_csi.provider.rest_client import RESTClient

logger = get_stdout_logger()


def get_region():
    return os.environ.get(config.controller.region_env) or config.controller.region


def get_provider_client():
    token_variable = config.controller.access_token_env
    access_token = os.environ.get(token_variable)
    if not access_token:
        raise MissingAccessTokenError(token_variable)
    logger.debug("creating provider client for {}".format(config.controller.api_url))
    return RESTClient(config.controller.api_url, access_token,
                      default_timeout=config.controller.request_timeout)
