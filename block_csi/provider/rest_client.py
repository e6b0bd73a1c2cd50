import requests

from block_csi.common.csi_logger import get_stdout_logger
from block_csi.provider.errors import ProviderError, UnexpectedProviderResponseError
from block_csi.provider.provider_client_interface import StorageProviderClient
from block_csi.provider.provider_types import Volume, PageLinks

logger = get_stdout_logger()

VOLUMES_PATH = "/v2/volumes"
VOLUME_PATH = "/v2/volumes/{}"
VOLUME_ACTIONS_PATH = "/v2/volumes/{}/actions"

ATTACH_ACTION = "attach"
DETACH_ACTION = "detach"


def _get_error_details(response):
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return response.text


class RESTClient(StorageProviderClient):
    """
    storage provider client over the provider JSON API.
    """

    def __init__(self, api_url, access_token, default_timeout=None, session=None):
        self.api_url = api_url.rstrip("/")
        self.default_timeout = default_timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Authorization": "Bearer {}".format(access_token),
                                      "Content-Type": "application/json"})

    def _request(self, method, path, timeout=None, **kwargs):
        url = self.api_url + path
        if timeout is None:
            timeout = self.default_timeout
        logger.debug("provider request : {} {}".format(method, url))
        try:
            response = self._session.request(method, url, timeout=timeout, **kwargs)
        except requests.RequestException as ex:
            raise ProviderError(method, url, details=str(ex))
        if not response.ok:
            raise ProviderError(method, url, status_code=response.status_code,
                                details=_get_error_details(response))
        if response.status_code == requests.codes.no_content or not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            raise UnexpectedProviderResponseError(url, response.text)

    def list_volumes(self, region, name=None, page=None, per_page=None, timeout=None):
        params = {"region": region}
        if name:
            params["name"] = name
        if page:
            params["page"] = page
        if per_page:
            params["per_page"] = per_page
        body = self._request("GET", VOLUMES_PATH, timeout=timeout, params=params)
        volumes = [Volume.from_api(api_volume) for api_volume in body.get("volumes", [])]
        return volumes, PageLinks.from_api(body.get("links"))

    def create_volume(self, region, name, description, size_gigabytes, timeout=None):
        payload = {"region": region,
                   "name": name,
                   "description": description,
                   "size_gigabytes": size_gigabytes}
        body = self._request("POST", VOLUMES_PATH, timeout=timeout, json=payload)
        try:
            return Volume.from_api(body["volume"])
        except KeyError:
            raise UnexpectedProviderResponseError(VOLUMES_PATH, body)

    def delete_volume(self, volume_id, timeout=None):
        self._request("DELETE", VOLUME_PATH.format(volume_id), timeout=timeout)

    def _volume_action(self, action_type, volume_id, droplet_id, region, timeout):
        payload = {"type": action_type, "droplet_id": droplet_id}
        if region:
            payload["region"] = region
        return self._request("POST", VOLUME_ACTIONS_PATH.format(volume_id), timeout=timeout, json=payload)

    def attach_volume(self, volume_id, droplet_id, region=None, timeout=None):
        self._volume_action(ATTACH_ACTION, volume_id, droplet_id, region, timeout)

    def detach_volume(self, volume_id, droplet_id, region=None, timeout=None):
        self._volume_action(DETACH_ACTION, volume_id, droplet_id, region, timeout)
