import logging
from dataclasses import dataclass

from .config import (
    KB,
    MAX_ADDRESS_BITS,
    MAX_PAGE_SIZE_KB,
    MIN_ADDRESS_BITS,
    MIN_PAGE_SIZE_KB,
    PTE_SIZE,
    Organization,
    is_power_of_two,
    parse_organization,
    safe_log_2,
)
from .errors import (
    AddressBitsOutOfRange,
    AddressSpaceTooSmall,
    PageSizeInvalid,
    TwoLevelSplitInfeasible,
)

logger = logging.getLogger(__name__)


def format_memory_size(n_bytes):
    """
    Format a byte count in the largest unit it reaches (GB, MB, KB, B)
    :param n_bytes: int
    :return: str, e.g. "4GB"
    """
    if n_bytes >= (1 << 30):
        return f"{n_bytes >> 30}GB"
    if n_bytes >= (1 << 20):
        return f"{n_bytes >> 20}MB"
    if n_bytes >= (1 << 10):
        return f"{n_bytes >> 10}KB"
    return f"{n_bytes}B"


@dataclass(frozen=True)
class Layout:
    """
    Bit-field partition of a virtual address for one page table organization.

    Single-level layouts leave the two-level fields at zero.
    """
    organization: Organization
    address_bits: int
    page_size_bytes: int
    offset_bits: int
    vpn_bits: int
    pte_size_bytes: int = PTE_SIZE
    entries_per_table: int = 0
    table_index_bits: int = 0
    directory_index_bits: int = 0

    @property
    def is_two_level(self):
        return self.organization is Organization.TWO_LEVEL

    @property
    def memory_size(self):
        return 1 << self.address_bits

    @property
    def total_pages(self):
        return 1 << self.vpn_bits

    @property
    def total_ptes(self):
        # one PTE per virtual page
        return self.total_pages

    @property
    def page_table_size(self):
        return self.total_pages * self.pte_size_bytes

    @property
    def directory_entries(self):
        """Number of second-level table pages, 0 for single-level tables."""
        if not self.is_two_level:
            return 0
        return 1 << self.directory_index_bits

    def __str__(self):
        print_str = ""
        print_str += f"size of the memory: {format_memory_size(self.memory_size)}\n"
        print_str += f"total number of pages: {self.total_pages}\n"
        print_str += f"total number of PTE (page table entries): {self.total_ptes}\n"
        print_str += f"size of page table: {self.page_table_size}\n"
        print_str += f"number of bits for VPN: {self.vpn_bits}\n"
        print_str += f"number of bits for page offset: {self.offset_bits}\n"
        if self.is_two_level:
            print_str += f"number of PTE in a page of page table: {self.entries_per_table}\n"
            print_str += f"number of pages in a page table: {self.directory_entries}\n"
            print_str += f"number of bits for page directory index: {self.directory_index_bits}\n"
            print_str += f"number of bits for page table index: {self.table_index_bits}\n"
        return print_str


def _validate(address_bits, page_size_bytes):
    if isinstance(address_bits, bool) or not isinstance(address_bits, int) \
            or not MIN_ADDRESS_BITS <= address_bits <= MAX_ADDRESS_BITS:
        raise AddressBitsOutOfRange(address_bits)
    if isinstance(page_size_bytes, bool) or not isinstance(page_size_bytes, int) \
            or not is_power_of_two(page_size_bytes) \
            or not MIN_PAGE_SIZE_KB * KB <= page_size_bytes <= MAX_PAGE_SIZE_KB * KB:
        raise PageSizeInvalid(page_size_bytes)
    # the address space must hold at least one page
    if page_size_bytes > (1 << address_bits):
        raise AddressSpaceTooSmall(address_bits, page_size_bytes)


def compute_layout(organization, address_bits, page_size_bytes):
    """
    Derive the bit-field widths of a virtual address
    :param organization: Organization or its selector (1 or 2)
    :param address_bits: int, width of a virtual address
    :param page_size_bytes: int, bytes per page
    :return: Layout
    :raises ConfigError: if any parameter is invalid, or a two-level split is impossible
    """
    organization = parse_organization(organization)
    _validate(address_bits, page_size_bytes)

    offset_bits = safe_log_2(page_size_bytes)
    vpn_bits = address_bits - offset_bits
    if organization is Organization.SINGLE_LEVEL:
        layout = Layout(organization, address_bits, page_size_bytes, offset_bits, vpn_bits)
        logger.debug("single-level layout: vpn_bits=%d offset_bits=%d", vpn_bits, offset_bits)
        return layout

    entries_per_table = page_size_bytes // PTE_SIZE
    table_index_bits = safe_log_2(entries_per_table)
    directory_index_bits = vpn_bits - table_index_bits
    if directory_index_bits < 0:
        raise TwoLevelSplitInfeasible(vpn_bits, table_index_bits)

    layout = Layout(
        organization,
        address_bits,
        page_size_bytes,
        offset_bits,
        vpn_bits,
        entries_per_table=entries_per_table,
        table_index_bits=table_index_bits,
        directory_index_bits=directory_index_bits,
    )
    logger.debug(
        "two-level layout: directory_index_bits=%d table_index_bits=%d offset_bits=%d",
        directory_index_bits, table_index_bits, offset_bits,
    )
    return layout
