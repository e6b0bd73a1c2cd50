import block_csi.servers.messages as messages
import block_csi.servers.settings as servers_settings
from block_csi.common.csi_logger import get_stdout_logger
from block_csi.common.settings import LISTING_FIRST_PAGE
from block_csi.common.size_converter import (DEFAULT_VOLUME_SIZE, MIN_VOLUME_SIZE, MAX_VOLUME_SIZE,
                                             convert_size_bytes_to_gib, convert_size_gib_to_bytes)
from block_csi.servers.csi.controller_types import (CsiVolume, CreateVolumeResponse, ListVolumesEntry,
                                                    ListVolumesResponse, ValidateVolumeCapabilitiesResponse)
from block_csi.servers.errors import (ValidationException, InvalidNodeId, InvalidListingToken,
                                      VolumeSizeOutOfRange)

logger = get_stdout_logger()


def _validate_not_empty(value, parameter_name):
    if not value:
        raise ValidationException(messages.PARAMETER_SHOULD_NOT_BE_EMPTY_MESSAGE.format(parameter_name))


def extract_storage(capacity_range):
    """
    Args:
        capacity_range : CapacityRange of the request or None
    Returns:
        the size to create in the provider size unit (GiB)
    Raises:
        ValidationException : both bounds are set and differ, only exact sizes are supported
    """
    if capacity_range is None:
        return convert_size_bytes_to_gib(DEFAULT_VOLUME_SIZE)

    required_bytes = capacity_range.required_bytes
    limit_bytes = capacity_range.limit_bytes
    if required_bytes < 0 or limit_bytes < 0:
        raise ValidationException(messages.SIZE_SHOULD_NOT_BE_NEGATIVE_MESSAGE)

    if required_bytes and limit_bytes:
        if required_bytes != limit_bytes:
            raise ValidationException(messages.CAPACITY_RANGE_NOT_EXACT_MESSAGE.format(required_bytes, limit_bytes))
        return convert_size_bytes_to_gib(required_bytes)

    if required_bytes or limit_bytes:
        return convert_size_bytes_to_gib(required_bytes or limit_bytes)

    return convert_size_bytes_to_gib(DEFAULT_VOLUME_SIZE)


def validate_volume_size(size_in_gib):
    size_in_bytes = convert_size_gib_to_bytes(size_in_gib)
    if not MIN_VOLUME_SIZE <= size_in_bytes <= MAX_VOLUME_SIZE:
        raise VolumeSizeOutOfRange(size_in_bytes, MIN_VOLUME_SIZE, MAX_VOLUME_SIZE)


def is_access_mode_supported(capability):
    return capability.access_mode in servers_settings.SUPPORTED_ACCESS_MODES


def are_volume_capabilities_supported(capabilities):
    if not capabilities:
        return False
    unsupported_capabilities = [capability for capability in capabilities
                                if not is_access_mode_supported(capability)]
    for capability in unsupported_capabilities:
        logger.debug("unsupported access mode : {}".format(capability.access_mode))
    return not unsupported_capabilities


def validate_csi_volume_capabilities(capabilities):
    logger.debug("validating csi volume capabilities")
    if not capabilities:
        raise ValidationException(messages.CAPABILITIES_NOT_SET_MESSAGE)

    for capability in capabilities:
        if not is_access_mode_supported(capability):
            raise ValidationException(messages.UNSUPPORTED_ACCESS_MODE_MESSAGE.format(capability.access_mode))
    logger.debug("csi volume capabilities validation finished.")


def validate_create_volume_request(request):
    logger.debug("validating create volume request")

    _validate_not_empty(request.name, "name")
    validate_csi_volume_capabilities(request.volume_capabilities)
    size_in_gib = extract_storage(request.capacity_range)
    validate_volume_size(size_in_gib)

    logger.debug("request validation finished.")
    return size_in_gib


def validate_delete_volume_request(request):
    logger.debug("validating delete volume request")
    _validate_not_empty(request.volume_id, "volume id")
    logger.debug("delete volume validation finished")


def validate_publish_volume_request(request):
    logger.debug("validating publish volume request")
    _validate_not_empty(request.volume_id, "volume id")
    _validate_not_empty(request.node_id, "node id")
    if request.volume_capability is not None:
        validate_csi_volume_capabilities([request.volume_capability])
    logger.debug("publish volume request validation finished.")


def validate_unpublish_volume_request(request):
    logger.debug("validating unpublish volume request")
    _validate_not_empty(request.volume_id, "volume id")
    _validate_not_empty(request.node_id, "node id")
    logger.debug("unpublish volume request validation finished.")


def validate_validate_volume_capabilities_request(request):
    logger.debug("validating validate volume capabilities request")
    _validate_not_empty(request.volume_id, "volume id")
    logger.debug("validate volume capabilities request validation finished.")


def validate_list_volumes_request(request):
    if request.max_entries < 0:
        raise ValidationException(messages.MAX_ENTRIES_SHOULD_NOT_BE_NEGATIVE_MESSAGE)


def get_droplet_id(node_id):
    """
    Args:
        node_id : node id reported by the node plugin, the decimal droplet id
    Returns:
        the droplet id as int
    Raises:
        InvalidNodeId
    """
    try:
        droplet_id = int(node_id)
    except (TypeError, ValueError):
        raise InvalidNodeId(node_id)
    if droplet_id <= 0:
        raise InvalidNodeId(node_id)
    return droplet_id


def get_starting_page(starting_token):
    if not starting_token:
        return LISTING_FIRST_PAGE
    if not (starting_token.isascii() and starting_token.isdigit()):
        raise InvalidListingToken(starting_token)
    return max(int(starting_token), LISTING_FIRST_PAGE)


def generate_csi_volume(volume_id, capacity_bytes):
    return CsiVolume(volume_id=volume_id, capacity_bytes=capacity_bytes)


def generate_csi_create_volume_response(volume_id, size_in_gib):
    logger.debug("creating create volume response for volume : {0}".format(volume_id))
    response = CreateVolumeResponse(volume=generate_csi_volume(volume_id, convert_size_gib_to_bytes(size_in_gib)))
    logger.debug("finished creating volume response : {0}".format(response))
    return response


def generate_csi_list_volumes_response(volumes, last_page):
    entries = [ListVolumesEntry(volume=generate_csi_volume(volume.id, volume.capacity_bytes)) for volume in volumes]
    return ListVolumesResponse(entries=entries, next_token=str(last_page))


def generate_csi_validate_volume_capabilities_response(capabilities):
    supported = are_volume_capabilities_supported(capabilities)
    message = "" if supported else messages.UNSUPPORTED_ACCESS_MODE_MESSAGE.format(
        [capability.access_mode for capability in capabilities])
    return ValidateVolumeCapabilitiesResponse(supported=supported, message=message)
