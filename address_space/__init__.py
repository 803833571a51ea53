from .config import PTE_SIZE, Organization
from .decomposer import AddressBreakdown, decompose, to_binary
from .errors import (
    AddressBitsOutOfRange,
    AddressOutOfRange,
    AddressSpaceTooSmall,
    ConfigError,
    InvalidOrganization,
    PageSizeInvalid,
    TwoLevelSplitInfeasible,
)
from .layout import Layout, compute_layout, format_memory_size
from .session import QuerySession

__all__ = ["PTE_SIZE", "Organization", "Layout", "compute_layout", "format_memory_size", "AddressBreakdown",
           "decompose", "to_binary", "QuerySession", "ConfigError", "InvalidOrganization", "AddressBitsOutOfRange",
           "PageSizeInvalid", "AddressSpaceTooSmall", "TwoLevelSplitInfeasible", "AddressOutOfRange"]
