from enum import Enum
from http import HTTPStatus

from block_csi.common.csi_logger import get_stdout_logger
from block_csi.common.settings import NOT_FOUND_MESSAGE
from block_csi.provider.errors import ProviderError

logger = get_stdout_logger()


class ProviderErrorClass(Enum):
    ALREADY_IN_DESIRED_STATE = "already_in_desired_state"
    NOT_FOUND = "not_found"
    TRANSIENT = "transient"
    PERMANENT = "permanent"
    UNKNOWN = "unknown"


def _message_contains(error, messages):
    details = (error.details or "").lower()
    return any(message.lower() in details for message in messages)


def classify_provider_error(error, desired_state_messages=()):
    """
    Maps a provider failure onto a protocol neutral class.

    The provider reports "already in the requested state" with a 422 status or only in the message text,
    so both signals are checked. A 422 means the desired state only for callers that name one through
    desired_state_messages, otherwise it is a permanent error.

    Args:
        error                  : ProviderError raised by the provider client
        desired_state_messages : message fragments meaning the requested end state already holds

    Returns:
        ProviderErrorClass
    """
    if not isinstance(error, ProviderError):
        return ProviderErrorClass.UNKNOWN

    status_code = error.status_code
    if status_code is None:
        logger.debug("provider call failed without a response, classified as transient")
        return ProviderErrorClass.TRANSIENT

    is_desired_state_status = bool(desired_state_messages) and status_code == HTTPStatus.UNPROCESSABLE_ENTITY
    if is_desired_state_status or _message_contains(error, desired_state_messages):
        error_class = ProviderErrorClass.ALREADY_IN_DESIRED_STATE
    elif status_code == HTTPStatus.NOT_FOUND or _message_contains(error, (NOT_FOUND_MESSAGE,)):
        error_class = ProviderErrorClass.NOT_FOUND
    elif status_code == HTTPStatus.TOO_MANY_REQUESTS or status_code >= 500:
        error_class = ProviderErrorClass.TRANSIENT
    elif 400 <= status_code < 500:
        error_class = ProviderErrorClass.PERMANENT
    else:
        error_class = ProviderErrorClass.UNKNOWN
    logger.debug("provider error with status {} classified as {}".format(status_code, error_class.name))
    return error_class
