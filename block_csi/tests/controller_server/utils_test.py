import unittest

import block_csi.servers.utils as utils
from block_csi.common.size_converter import GiB, TiB, MiB
from block_csi.servers.csi.controller_types import (AccessMode, CapacityRange, CreateVolumeRequest,
                                                    ListVolumesRequest)
from block_csi.servers.errors import (ValidationException, InvalidNodeId, InvalidListingToken,
                                      VolumeSizeOutOfRange)
from block_csi.tests.common.test_settings import VOLUME_NAME, NODE_ID, DROPLET_ID
from block_csi.tests.utils import get_mock_volume_capability, get_exact_capacity_range, get_provider_volume


class TestExtractStorage(unittest.TestCase):

    def test_no_capacity_range_returns_default(self):
        self.assertEqual(16, utils.extract_storage(None))

    def test_empty_capacity_range_returns_default(self):
        self.assertEqual(16, utils.extract_storage(CapacityRange()))

    def test_exact_capacity_range(self):
        for size_in_gib in (1, 16, 100, 16 * 1024):
            self.assertEqual(size_in_gib, utils.extract_storage(get_exact_capacity_range(size_in_gib * GiB)))

    def test_exact_capacity_range_drops_partial_gib(self):
        self.assertEqual(1, utils.extract_storage(get_exact_capacity_range(GiB + 512 * MiB)))

    def test_different_bounds_fail(self):
        capacity_range = CapacityRange(required_bytes=16 * GiB, limit_bytes=32 * GiB)

        with self.assertRaises(ValidationException) as context_manager:
            utils.extract_storage(capacity_range)
        self.assertIn(str(16 * GiB), str(context_manager.exception))

    def test_bounds_in_same_gib_fail(self):
        with self.assertRaises(ValidationException):
            utils.extract_storage(CapacityRange(required_bytes=GiB, limit_bytes=GiB + 1))

    def test_single_bound(self):
        self.assertEqual(8, utils.extract_storage(CapacityRange(required_bytes=8 * GiB)))
        self.assertEqual(4, utils.extract_storage(CapacityRange(limit_bytes=4 * GiB)))

    def test_negative_bound_fails(self):
        with self.assertRaises(ValidationException):
            utils.extract_storage(CapacityRange(required_bytes=-1))


class TestValidateCreateVolumeRequest(unittest.TestCase):

    def setUp(self):
        self.request = CreateVolumeRequest(name=VOLUME_NAME,
                                           capacity_range=get_exact_capacity_range(16 * GiB),
                                           volume_capabilities=[get_mock_volume_capability()])

    def test_validate_create_volume_request_returns_size(self):
        self.assertEqual(16, utils.validate_create_volume_request(self.request))

    def test_empty_name(self):
        self.request.name = ""
        with self.assertRaises(ValidationException) as context_manager:
            utils.validate_create_volume_request(self.request)
        self.assertIn("name", str(context_manager.exception))

    def test_no_capabilities(self):
        self.request.volume_capabilities = []
        with self.assertRaises(ValidationException):
            utils.validate_create_volume_request(self.request)

    def test_unsupported_capability(self):
        self.request.volume_capabilities = [get_mock_volume_capability(),
                                            get_mock_volume_capability(AccessMode.MULTI_NODE_MULTI_WRITER)]
        with self.assertRaises(ValidationException):
            utils.validate_create_volume_request(self.request)

    def test_size_below_minimum(self):
        self.request.capacity_range = get_exact_capacity_range(512 * MiB)
        with self.assertRaises(VolumeSizeOutOfRange):
            utils.validate_create_volume_request(self.request)

    def test_size_above_maximum(self):
        self.request.capacity_range = get_exact_capacity_range(17 * TiB)
        with self.assertRaises(VolumeSizeOutOfRange):
            utils.validate_create_volume_request(self.request)


class TestVolumeCapabilities(unittest.TestCase):

    def test_all_supported(self):
        capabilities = [get_mock_volume_capability(), get_mock_volume_capability(fs_type="xfs")]
        self.assertTrue(utils.are_volume_capabilities_supported(capabilities))

    def test_unsupported_after_supported(self):
        capabilities = [get_mock_volume_capability(),
                        get_mock_volume_capability(AccessMode.SINGLE_NODE_READER_ONLY)]
        self.assertFalse(utils.are_volume_capabilities_supported(capabilities))

    def test_supported_after_unsupported(self):
        capabilities = [get_mock_volume_capability(AccessMode.MULTI_NODE_READER_ONLY),
                        get_mock_volume_capability()]
        self.assertFalse(utils.are_volume_capabilities_supported(capabilities))

    def test_no_capabilities(self):
        self.assertFalse(utils.are_volume_capabilities_supported([]))

    def test_validate_volume_capabilities_response(self):
        response = utils.generate_csi_validate_volume_capabilities_response(
            [get_mock_volume_capability(AccessMode.MULTI_NODE_MULTI_WRITER)])

        self.assertFalse(response.supported)
        self.assertIn("unsupported access mode", response.message)


class TestGetDropletId(unittest.TestCase):

    def test_get_droplet_id(self):
        self.assertEqual(DROPLET_ID, utils.get_droplet_id(NODE_ID))

    def test_malformed_node_id(self):
        for node_id in ("node-1", "", None, "12.5", "0", "-3"):
            with self.assertRaises(InvalidNodeId):
                utils.get_droplet_id(node_id)


class TestListing(unittest.TestCase):

    def test_get_starting_page(self):
        self.assertEqual(1, utils.get_starting_page(""))
        self.assertEqual(1, utils.get_starting_page("0"))
        self.assertEqual(3, utils.get_starting_page("3"))

    def test_malformed_starting_token(self):
        for starting_token in ("abc", "1.5", "-1", " 2 ", "+2", "1_0", "\u0663"):
            with self.assertRaises(InvalidListingToken):
                utils.get_starting_page(starting_token)

    def test_negative_max_entries(self):
        with self.assertRaises(ValidationException):
            utils.validate_list_volumes_request(ListVolumesRequest(max_entries=-1))

    def test_generate_csi_list_volumes_response(self):
        volumes = [get_provider_volume(size_gigabytes=1, volume_id="1"),
                   get_provider_volume(size_gigabytes=2, volume_id="2")]

        response = utils.generate_csi_list_volumes_response(volumes, 4)

        self.assertEqual("4", response.next_token)
        self.assertEqual([("1", GiB), ("2", 2 * GiB)],
                         [(entry.volume.volume_id, entry.volume.capacity_bytes) for entry in response.entries])
