import grpc

import block_csi.servers.settings as servers_settings
import block_csi.servers.utils as utils
from block_csi.common.config import config as common_config
from block_csi.common.csi_logger import get_stdout_logger
from block_csi.common.settings import OWNERSHIP_TAG, ALREADY_ATTACHED_MESSAGE, ATTACHMENT_NOT_FOUND_MESSAGE
from block_csi.common.utils import get_request_timeout
from block_csi.provider.client_factory import get_provider_client, get_region
from block_csi.provider.error_classifier import classify_provider_error, ProviderErrorClass
from block_csi.provider.errors import ProviderError
from block_csi.servers import messages as controller_messages
from block_csi.servers.csi import controller_types as types
from block_csi.servers.csi.decorators import csi_method
from block_csi.servers.csi.exception_handler import build_error_response
from block_csi.servers.errors import (DuplicateVolumeNameError, VolumeNotOwnedError, RequestCancelledError,
                                     DeadlineExceededError)

logger = get_stdout_logger()


class CSIControllerServicer:
    """
    CSI controller and identity services for provider block storage volumes.

    Every handler is idempotent, the orchestrator retries a request after a crash or a timeout.
    """

    def __init__(self, region=None):
        self.region = region or get_region()

    def _get_timeout(self, context, method_name):
        timeout = get_request_timeout(context, common_config.controller.request_timeout)
        if timeout <= 0:
            raise DeadlineExceededError(method_name)
        return timeout

    def _ensure_active(self, context, method_name):
        if not context.is_active():
            raise RequestCancelledError(method_name)

    @csi_method(error_response_type=types.CreateVolumeResponse,
                thread_name_request_attribute=servers_settings.NAME_REQUEST_ATTRIBUTE)
    def CreateVolume(self, request, context):
        size_in_gib = utils.validate_create_volume_request(request)
        volume_name = request.name
        logger.debug("volume name : {}".format(volume_name))

        provider_client = get_provider_client()
        volumes, _ = provider_client.list_volumes(self.region, name=volume_name,
                                                  timeout=self._get_timeout(context, "CreateVolume"))
        if volumes:
            return self._get_create_volume_response_for_existing_volume(volume_name, volumes)

        # TODO: serialize CreateVolume per name, a concurrent call for the same name may pass the listing above
        #  as well and the provider does not enforce unique names
        self._ensure_active(context, "CreateVolume")
        logger.debug("volume was not found. creating a new volume {} with size {} GiB in region {}".format(
            volume_name, size_in_gib, self.region))
        volume = provider_client.create_volume(self.region, volume_name, OWNERSHIP_TAG, size_in_gib,
                                               timeout=self._get_timeout(context, "CreateVolume"))
        logger.info("volume {} created with id {}".format(volume_name, volume.id))
        return utils.generate_csi_create_volume_response(volume.id, size_in_gib)

    def _get_create_volume_response_for_existing_volume(self, volume_name, volumes):
        """
        Args:
            volume_name : name of the requested volume
            volumes     : provider volumes named volume_name
        Returns:
            CreateVolumeResponse of the existing volume, it is never re-created nor modified
        Raises:
            DuplicateVolumeNameError : more than one volume has the name
            VolumeNotOwnedError      : the volume was created outside of the plugin
        """
        if len(volumes) > 1:
            raise DuplicateVolumeNameError(volume_name, len(volumes))
        volume = volumes[0]
        if not volume.is_owned:
            raise VolumeNotOwnedError(volume.name, volume.description)
        logger.debug("volume found : {}".format(volume))
        return utils.generate_csi_create_volume_response(volume.id, volume.size_gigabytes)

    @csi_method(error_response_type=types.DeleteVolumeResponse,
                thread_name_request_attribute=servers_settings.VOLUME_ID_REQUEST_ATTRIBUTE)
    def DeleteVolume(self, request, context):
        utils.validate_delete_volume_request(request)
        volume_id = request.volume_id

        provider_client = get_provider_client()
        try:
            logger.debug("Deleting volume {0}".format(volume_id))
            provider_client.delete_volume(volume_id, timeout=self._get_timeout(context, "DeleteVolume"))
        except ProviderError as ex:
            if classify_provider_error(ex) != ProviderErrorClass.NOT_FOUND:
                raise
            logger.debug("Idempotent case. volume was not found during deletion: {0}".format(ex))

        return types.DeleteVolumeResponse()

    def _raise_unless_in_desired_state(self, error, desired_state_message):
        if classify_provider_error(error, (desired_state_message,)) != ProviderErrorClass.ALREADY_IN_DESIRED_STATE:
            raise error
        logger.debug("Idempotent case. {}".format(error))

    @csi_method(error_response_type=types.ControllerPublishVolumeResponse,
                thread_name_request_attribute=servers_settings.VOLUME_ID_REQUEST_ATTRIBUTE)
    def ControllerPublishVolume(self, request, context):
        utils.validate_publish_volume_request(request)
        volume_id = request.volume_id
        droplet_id = utils.get_droplet_id(request.node_id)
        logger.debug("droplet id for this publish operation is : {0}".format(droplet_id))

        provider_client = get_provider_client()
        # TODO: wait for the attach action to complete instead of returning once it is accepted
        try:
            provider_client.attach_volume(volume_id, droplet_id, region=self.region,
                                          timeout=self._get_timeout(context, "ControllerPublishVolume"))
        except ProviderError as ex:
            self._raise_unless_in_desired_state(ex, ALREADY_ATTACHED_MESSAGE)

        return types.ControllerPublishVolumeResponse()

    @csi_method(error_response_type=types.ControllerUnpublishVolumeResponse,
                thread_name_request_attribute=servers_settings.VOLUME_ID_REQUEST_ATTRIBUTE)
    def ControllerUnpublishVolume(self, request, context):
        utils.validate_unpublish_volume_request(request)
        volume_id = request.volume_id
        droplet_id = utils.get_droplet_id(request.node_id)
        logger.debug("droplet id for this unpublish operation is : {0}".format(droplet_id))

        provider_client = get_provider_client()
        try:
            provider_client.detach_volume(volume_id, droplet_id, region=self.region,
                                          timeout=self._get_timeout(context, "ControllerUnpublishVolume"))
        except ProviderError as ex:
            self._raise_unless_in_desired_state(ex, ATTACHMENT_NOT_FOUND_MESSAGE)

        return types.ControllerUnpublishVolumeResponse()

    @csi_method(error_response_type=types.ValidateVolumeCapabilitiesResponse,
                thread_name_request_attribute=servers_settings.VOLUME_ID_REQUEST_ATTRIBUTE)
    def ValidateVolumeCapabilities(self, request, context):
        utils.validate_validate_volume_capabilities_request(request)
        return utils.generate_csi_validate_volume_capabilities_response(request.volume_capabilities)

    @csi_method(error_response_type=types.ListVolumesResponse)
    def ListVolumes(self, request, context):
        utils.validate_list_volumes_request(request)
        page = utils.get_starting_page(request.starting_token)
        per_page = request.max_entries or None

        provider_client = get_provider_client()
        volumes = []
        # pages are read one after the other without a snapshot, volumes created or deleted meanwhile may be
        # skipped or listed twice
        while True:
            self._ensure_active(context, "ListVolumes")
            page_volumes, links = provider_client.list_volumes(self.region, page=page, per_page=per_page,
                                                               timeout=self._get_timeout(context, "ListVolumes"))
            volumes.extend(page_volumes)
            logger.debug("got {} volumes from page {}".format(len(page_volumes), page))

            if links is None or links.is_last_page():
                last_page = links.current_page() if links else page
                break
            page = links.current_page() + 1

        return utils.generate_csi_list_volumes_response(volumes, last_page)

    @csi_method(error_response_type=types.GetCapacityResponse)
    def GetCapacity(self, request, context):
        raise NotImplementedError()

    def ControllerGetCapabilities(self, request, context):
        logger.info("ControllerGetCapabilities")
        response = types.ControllerGetCapabilitiesResponse(
            capabilities=list(servers_settings.CONTROLLER_CAPABILITIES))
        logger.info("finished ControllerGetCapabilities")
        return response

    @csi_method(error_response_type=types.GetPluginInfoResponse)
    def GetPluginInfo(self, _, context):  # pylint: disable=invalid-name
        name = common_config.identity.name
        version = common_config.identity.version

        if not name or not version:
            return build_error_response(controller_messages.PLUGIN_INFO_MISSING_MESSAGE, context,
                                        grpc.StatusCode.INTERNAL, types.GetPluginInfoResponse)

        return types.GetPluginInfoResponse(name=name, vendor_version=version)

    def GetPluginCapabilities(self, _, __):  # pylint: disable=invalid-name
        logger.info("GetPluginCapabilities")
        service_capabilities = common_config.identity.capabilities.Service or []
        capabilities = [types.PluginCapability[service_capability] for service_capability in service_capabilities]
        logger.info("finished GetPluginCapabilities")
        return types.GetPluginCapabilitiesResponse(capabilities=capabilities)

    def Probe(self, _, context):  # pylint: disable=invalid-name
        context.set_code(grpc.StatusCode.OK)
        return types.ProbeResponse()
