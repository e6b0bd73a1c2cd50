from block_csi.servers.csi.controller_types import AccessMode, ControllerCapability

SUPPORTED_ACCESS_MODES = [AccessMode.SINGLE_NODE_WRITER]

CONTROLLER_CAPABILITIES = [ControllerCapability.CREATE_DELETE_VOLUME,
                           ControllerCapability.PUBLISH_UNPUBLISH_VOLUME,
                           ControllerCapability.LIST_VOLUMES,
                           ControllerCapability.GET_CAPACITY]

NAME_REQUEST_ATTRIBUTE = "name"
VOLUME_ID_REQUEST_ATTRIBUTE = "volume_id"
