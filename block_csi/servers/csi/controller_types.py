from dataclasses import dataclass, field
from enum import IntEnum


class AccessMode(IntEnum):
    UNKNOWN = 0
    SINGLE_NODE_WRITER = 1
    SINGLE_NODE_READER_ONLY = 2
    MULTI_NODE_READER_ONLY = 3
    MULTI_NODE_SINGLE_WRITER = 4
    MULTI_NODE_MULTI_WRITER = 5


class ControllerCapability(IntEnum):
    UNKNOWN = 0
    CREATE_DELETE_VOLUME = 1
    PUBLISH_UNPUBLISH_VOLUME = 2
    LIST_VOLUMES = 3
    GET_CAPACITY = 4


class PluginCapability(IntEnum):
    UNKNOWN = 0
    CONTROLLER_SERVICE = 1


@dataclass
class CapacityRange:
    required_bytes: int = 0
    limit_bytes: int = 0


@dataclass
class VolumeCapability:
    access_mode: AccessMode = AccessMode.UNKNOWN
    fs_type: str = ""


@dataclass
class CsiVolume:
    volume_id: str = ""
    capacity_bytes: int = 0


# =============================================================================
# Requests
# =============================================================================

@dataclass
class CreateVolumeRequest:
    name: str = ""
    capacity_range: CapacityRange = None
    volume_capabilities: list = field(default_factory=list)
    parameters: dict = field(default_factory=dict)
    secrets: dict = field(default_factory=dict)


@dataclass
class DeleteVolumeRequest:
    volume_id: str = ""
    secrets: dict = field(default_factory=dict)


@dataclass
class ControllerPublishVolumeRequest:
    volume_id: str = ""
    node_id: str = ""
    volume_capability: VolumeCapability = None
    readonly: bool = False
    secrets: dict = field(default_factory=dict)


@dataclass
class ControllerUnpublishVolumeRequest:
    volume_id: str = ""
    node_id: str = ""
    secrets: dict = field(default_factory=dict)


@dataclass
class ValidateVolumeCapabilitiesRequest:
    volume_id: str = ""
    volume_capabilities: list = field(default_factory=list)


@dataclass
class ListVolumesRequest:
    max_entries: int = 0
    starting_token: str = ""


@dataclass
class GetCapacityRequest:
    volume_capabilities: list = field(default_factory=list)
    parameters: dict = field(default_factory=dict)


# =============================================================================
# Responses
# =============================================================================

@dataclass
class CreateVolumeResponse:
    volume: CsiVolume = None


@dataclass
class DeleteVolumeResponse:
    pass


@dataclass
class ControllerPublishVolumeResponse:
    publish_info: dict = field(default_factory=dict)


@dataclass
class ControllerUnpublishVolumeResponse:
    pass


@dataclass
class ValidateVolumeCapabilitiesResponse:
    supported: bool = False
    message: str = ""


@dataclass
class ListVolumesEntry:
    volume: CsiVolume = None


@dataclass
class ListVolumesResponse:
    entries: list = field(default_factory=list)
    next_token: str = ""


@dataclass
class GetCapacityResponse:
    available_capacity: int = 0


@dataclass
class ControllerGetCapabilitiesResponse:
    capabilities: list = field(default_factory=list)


@dataclass
class GetPluginInfoResponse:
    name: str = ""
    vendor_version: str = ""


@dataclass
class GetPluginCapabilitiesResponse:
    capabilities: list = field(default_factory=list)


@dataclass
class ProbeResponse:
    ready: bool = True
