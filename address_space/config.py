import math
from enum import IntEnum

from .errors import InvalidOrganization

# standard size for a page table entry in bytes
PTE_SIZE = 4

KB = 1024

MIN_ADDRESS_BITS = 8
MAX_ADDRESS_BITS = 63
MIN_PAGE_SIZE_KB = 1
MAX_PAGE_SIZE_KB = 512


class Organization(IntEnum):
    """Page table organization, valued by its command line selector."""
    SINGLE_LEVEL = 1
    TWO_LEVEL = 2


def is_power_of_two(n):
    """Check if a number is a power of two. uses bit operations."""
    return n > 0 and (n & (n - 1)) == 0


def safe_log_2(n):
    """Compute the base-2 logarithm of a number, ensuring the number is a power of two."""
    if not is_power_of_two(n):
        raise ValueError("Input must be a power of two.")
    return int(math.log2(n))


def parse_organization(selector):
    """
    Turn a page table type selector (1 or 2) into an Organization
    :param selector: Organization or int, the raw selector
    :return: Organization
    """
    if isinstance(selector, Organization):
        return selector
    if isinstance(selector, bool) or not isinstance(selector, int):
        raise InvalidOrganization(selector)
    try:
        return Organization(selector)
    except ValueError:
        raise InvalidOrganization(selector) from None


def page_size_from_kb(page_size_kb):
    """
    Convert a page size given in KB to bytes; range checks happen in compute_layout
    :param page_size_kb: int, page size in KB
    :return: int, page size in bytes
    """
    return page_size_kb * KB

