from dataclasses import dataclass, field
from urllib.parse import urlparse, parse_qs

from block_csi.common.settings import OWNERSHIP_TAG, LISTING_FIRST_PAGE
from block_csi.common.size_converter import convert_size_gib_to_bytes
from block_csi.provider.errors import UnexpectedProviderResponseError

PAGE_QUERY_PARAMETER = "page"


@dataclass
class Volume:
    id: str
    name: str
    size_gigabytes: int
    description: str = ""
    region: str = ""
    droplet_ids: list = field(default_factory=list)

    @property
    def capacity_bytes(self):
        return convert_size_gib_to_bytes(self.size_gigabytes)

    @property
    def is_owned(self):
        return self.description == OWNERSHIP_TAG

    @classmethod
    def from_api(cls, api_volume):
        region = api_volume.get("region") or {}
        return cls(id=api_volume["id"],
                   name=api_volume["name"],
                   size_gigabytes=api_volume["size_gigabytes"],
                   description=api_volume.get("description") or "",
                   region=region.get("slug", "") if isinstance(region, dict) else region,
                   droplet_ids=list(api_volume.get("droplet_ids") or []))


def _get_page_from_url(url):
    query = parse_qs(urlparse(url).query)
    try:
        return int(query[PAGE_QUERY_PARAMETER][0])
    except (KeyError, IndexError, ValueError):
        raise UnexpectedProviderResponseError(url, "page link without a page number")


@dataclass
class PageLinks:
    """
    The "links.pages" block of a provider listing response. Only the links that lead somewhere are present:
    the first page has no "prev", the last page has no "last" nor "next".
    """
    first: str = ""
    prev: str = ""
    next: str = ""
    last: str = ""

    def is_last_page(self):
        return not self.last and not self.next

    def current_page(self):
        if self.prev:
            return _get_page_from_url(self.prev) + 1
        if self.next:
            return _get_page_from_url(self.next) - 1
        return LISTING_FIRST_PAGE

    @classmethod
    def from_api(cls, api_links):
        if not api_links:
            return None
        pages = api_links.get("pages")
        if not pages:
            return None
        return cls(first=pages.get("first", ""),
                   prev=pages.get("prev", ""),
                   next=pages.get("next", ""),
                   last=pages.get("last", ""))
