import grpc
from mock import Mock

from block_csi.provider.errors import ProviderError
from block_csi.provider.provider_types import Volume, PageLinks
from block_csi.servers.csi.controller_types import AccessMode, VolumeCapability, CapacityRange
from block_csi.tests.common.test_settings import VOLUME_NAME, VOLUME_ID, VOLUME_DESCRIPTION, REGION, API_URL

PAGE_URL_FORMAT = API_URL + "/v2/volumes?page={}&per_page={}"


def get_provider_volume(size_gigabytes=16, name=VOLUME_NAME, volume_id=VOLUME_ID, description=VOLUME_DESCRIPTION):
    return Volume(id=volume_id, name=name, size_gigabytes=size_gigabytes, description=description, region=REGION)


def get_page_links(page, last_page, per_page):
    """
    Builds the links block the provider sends with page number page out of last_page pages.
    """
    if last_page <= 1:
        return None
    links = PageLinks()
    if page > 1:
        links.first = PAGE_URL_FORMAT.format(1, per_page)
        links.prev = PAGE_URL_FORMAT.format(page - 1, per_page)
    if page < last_page:
        links.next = PAGE_URL_FORMAT.format(page + 1, per_page)
        links.last = PAGE_URL_FORMAT.format(last_page, per_page)
    return links


def get_mock_volume_capability(mode=AccessMode.SINGLE_NODE_WRITER, fs_type="ext4"):
    return VolumeCapability(access_mode=mode, fs_type=fs_type)


def get_exact_capacity_range(size_in_bytes):
    return CapacityRange(required_bytes=size_in_bytes, limit_bytes=size_in_bytes)


def get_provider_error(status_code=None, details="error", method="POST", url=API_URL):
    return ProviderError(method, url, status_code=status_code, details=details)


def get_mock_response(status_code=200, json_body=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    response.content = text.encode() if text else b""
    if json_body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_body
        response.content = b"{}"
    return response


class FakeContext:

    def __init__(self, time_remaining=None, active=True):
        self.code = grpc.StatusCode.OK
        self.details = ""
        self._time_remaining = time_remaining
        self.active = active

    def set_code(self, code):
        self.code = code

    def set_details(self, details):
        self.details = details

    def is_active(self):
        return self.active

    def time_remaining(self):
        return self._time_remaining
