from abc import ABC, abstractmethod


class StorageProviderClient(ABC):

    @abstractmethod
    def list_volumes(self, region, name=None, page=None, per_page=None, timeout=None):
        """
        This function should return one page of the volumes in the region.

        Args:
            region   : region slug to list volumes in
            name     : only return volumes with this exact name (None for all)
            page     : page number to fetch, starting from 1 (None for the first page)
            per_page : maximal number of volumes in the page (None for the provider default)
            timeout  : seconds to wait for the provider

        Returns:
            (volumes, links) : list of Volume and PageLinks, links is None when the listing has a single page

        Raises:
            ProviderError
        """
        raise NotImplementedError

    @abstractmethod
    def create_volume(self, region, name, description, size_gigabytes, timeout=None):
        """
        This function should create a volume in the region.

        Args:
            region         : region slug to create the volume in
            name           : name of the volume
            description    : free text stored with the volume
            size_gigabytes : size of the volume in GiB
            timeout        : seconds to wait for the provider

        Returns:
            Volume

        Raises:
            ProviderError
        """
        raise NotImplementedError

    @abstractmethod
    def delete_volume(self, volume_id, timeout=None):
        """
        Args:
            volume_id : provider id of the volume
            timeout   : seconds to wait for the provider

        Raises:
            ProviderError : 404 when the volume does not exist
        """
        raise NotImplementedError

    @abstractmethod
    def attach_volume(self, volume_id, droplet_id, region=None, timeout=None):
        """
        This function should request the attachment of a volume to a droplet. It returns once the provider
        accepted the action, not when the volume is attached.

        Args:
            volume_id  : provider id of the volume
            droplet_id : numeric id of the droplet
            region     : region slug of the volume and the droplet
            timeout    : seconds to wait for the provider

        Raises:
            ProviderError : 422 or an "already attached" message when the volume is attached
        """
        raise NotImplementedError

    @abstractmethod
    def detach_volume(self, volume_id, droplet_id, region=None, timeout=None):
        """
        This function should request the detachment of a volume from a droplet.

        Args:
            volume_id  : provider id of the volume
            droplet_id : numeric id of the droplet
            region     : region slug of the volume and the droplet
            timeout    : seconds to wait for the provider

        Raises:
            ProviderError : 422 or an "Attachment not found" message when the volume is not attached
        """
        raise NotImplementedError
