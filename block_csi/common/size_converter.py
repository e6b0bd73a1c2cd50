# =============================================================================
# Definitions
# =============================================================================

KiB = 2**10     # Kibibyte = KiB = 2^10 B = 1,024 bytes
MiB = 2**20     # Mebibyte = MiB = 2^20 B = 1,048,576 bytes
GiB = 2**30     # Gibibyte = GiB = 2^30 B = 1,073,741,824 bytes
TiB = 2**40     # Tebibyte = TiB = 2^40 B = 1,099,511,627,776 bytes

# volumes provisioned by earlier releases of the driver rely on these values
DEFAULT_VOLUME_SIZE = 16 * GiB
MIN_VOLUME_SIZE = 1 * GiB
MAX_VOLUME_SIZE = 16 * TiB

# the provider sizes volumes in whole gibibytes
PROVIDER_SIZE_UNIT = GiB


# =============================================================================
# Methods converting to bytes.
# =============================================================================

def convert_size_gib_to_bytes(size_in_gib):
    return size_in_gib * PROVIDER_SIZE_UNIT


# =============================================================================
# Methods converting from bytes.
# =============================================================================

def convert_size_bytes_to_gib(size_in_bytes):
    """
    Integer division, a partial gibibyte is dropped.
    """
    return size_in_bytes // PROVIDER_SIZE_UNIT
