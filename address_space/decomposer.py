from dataclasses import dataclass
from typing import Optional

from .errors import AddressOutOfRange
from .layout import Layout


def to_binary(value, num_bits):
    """Render value as exactly num_bits binary digits, zero padded. 0 bits gives ''."""
    if num_bits == 0:
        return ""
    return format(value, f"0{num_bits}b")


@dataclass(frozen=True)
class AddressBreakdown:
    """
    A virtual address split into its page offset, VPN and, for two-level
    tables, its page directory and page table indices
    """
    layout: Layout
    virtual_address: int
    offset: int
    vpn: int
    directory_index: Optional[int] = None
    table_index: Optional[int] = None

    @property
    def address_binary(self):
        return to_binary(self.virtual_address, self.layout.address_bits)

    @property
    def vpn_binary(self):
        return to_binary(self.vpn, self.layout.vpn_bits)

    @property
    def offset_binary(self):
        return to_binary(self.offset, self.layout.offset_bits)

    @property
    def directory_index_binary(self):
        if self.directory_index is None:
            return None
        return to_binary(self.directory_index, self.layout.directory_index_bits)

    @property
    def table_index_binary(self):
        if self.table_index is None:
            return None
        return to_binary(self.table_index, self.layout.table_index_bits)

    def rebuild(self):
        """
        Reassemble the virtual address from the decomposed fields
        :return: int
        """
        vpn = self.vpn
        if self.layout.is_two_level:
            vpn = (self.directory_index << self.layout.table_index_bits) | self.table_index
        return (vpn << self.layout.offset_bits) | self.offset

    def __str__(self):
        print_str = ""
        print_str += f"VPN of the address in decimal: {self.vpn}\n"
        print_str += f"page offset of the address in decimal: {self.offset}\n"
        if self.layout.is_two_level:
            print_str += f"page directory index in decimal: {self.directory_index}\n"
            print_str += f"page table index in decimal: {self.table_index}\n"
        print_str += f"the input address in binary: {self.address_binary}\n"
        print_str += f"VPN of the address in binary: {self.vpn_binary}\n"
        print_str += f"page offset of the address in binary: {self.offset_binary}\n"
        if self.layout.is_two_level:
            print_str += f"page directory index in binary: {self.directory_index_binary}\n"
            print_str += f"page table index in binary: {self.table_index_binary}\n"
        return print_str


def decompose(layout, virtual_address):
    """
    Split a virtual address into its fields under the given layout
    :param layout: Layout
    :param virtual_address: int, must be below 2^address_bits
    :return: AddressBreakdown
    :raises AddressOutOfRange: if the address does not fit the address space
    """
    if virtual_address < 0 or virtual_address >= layout.memory_size:
        raise AddressOutOfRange(virtual_address, layout.memory_size)

    offset_mask = (1 << layout.offset_bits) - 1
    offset = virtual_address & offset_mask
    vpn = virtual_address >> layout.offset_bits
    if not layout.is_two_level:
        return AddressBreakdown(layout, virtual_address, offset, vpn)

    table_index_mask = (1 << layout.table_index_bits) - 1
    table_index = vpn & table_index_mask
    directory_index = vpn >> layout.table_index_bits
    return AddressBreakdown(layout, virtual_address, offset, vpn,
                            directory_index=directory_index, table_index=table_index)
