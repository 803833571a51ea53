"""
Errors raised while building a layout or decomposing an address.

Every ConfigError is fatal to a session: no layout is produced. AddressOutOfRange
only concerns a single query.
"""


class ConfigError(ValueError):
    """Base class for invalid layout parameters."""


class InvalidOrganization(ConfigError):
    def __init__(self, organization):
        self.organization = organization
        super().__init__("page table type must be 1 or 2.")


class AddressBitsOutOfRange(ConfigError):
    def __init__(self, address_bits):
        self.address_bits = address_bits
        super().__init__("address bits must be between 8 and 63.")


class PageSizeInvalid(ConfigError):
    def __init__(self, page_size_bytes):
        self.page_size_bytes = page_size_bytes
        super().__init__("page size must be a power of two between 1 and 512 KB.")


class AddressSpaceTooSmall(ConfigError):
    def __init__(self, address_bits, page_size_bytes):
        self.address_bits = address_bits
        self.page_size_bytes = page_size_bytes
        super().__init__("address space is too small for the specified page size.")


class TwoLevelSplitInfeasible(ConfigError):
    def __init__(self, vpn_bits, table_index_bits):
        self.vpn_bits = vpn_bits
        self.table_index_bits = table_index_bits
        super().__init__(
            f"address space is too small for a two-level page table "
            f"(vpn_bits={vpn_bits}, table_index_bits={table_index_bits})."
        )


class AddressOutOfRange(ValueError):
    def __init__(self, virtual_address, memory_size):
        self.virtual_address = virtual_address
        self.memory_size = memory_size
        super().__init__(f"address exceeds memory bounds of {memory_size} bytes.")
