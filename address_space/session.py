import logging
import sys

from .decomposer import decompose
from .errors import AddressOutOfRange

logger = logging.getLogger(__name__)

PROMPT = "decimal virtual address: "


class QuerySession:
    """Decomposes a sequence of virtual addresses against a fixed layout and prints each result."""
    def __init__(self, layout, out=None, prompt=True):
        self.layout = layout
        self.out = out if out is not None else sys.stdout
        self.prompt = prompt

        # stats for tracking
        self.queries = 0
        self.decomposed = 0
        self.out_of_range = 0

    def _write(self, text):
        self.out.write(text)

    def query(self, virtual_address):
        """
        Decompose and report a single address, reporting out of range addresses instead of raising
        :param virtual_address: int
        :return: AddressBreakdown, or None if the address was out of range
        """
        self.queries += 1
        try:
            breakdown = decompose(self.layout, virtual_address)
        except AddressOutOfRange as e:
            self.out_of_range += 1
            logger.debug("rejected address %d", virtual_address)
            self._write(f"Error: {e}\n")
            return None
        self.decomposed += 1
        self._write(str(breakdown))
        return breakdown

    def run(self, addresses):
        """
        Core loop, one query per address until the input is exhausted
        :param addresses: iterable of int, e.g. an AddressReader
        :return: dict of stats
        """
        if self.prompt:
            self._write(PROMPT)
        for virtual_address in addresses:
            self.query(virtual_address)
            if self.prompt:
                self._write(PROMPT)
        if self.prompt:
            self._write("\n")
        logger.debug("session finished: %s", self.get_stats())
        return self.get_stats()

    def get_stats(self):
        """
        Get session stats
        :return: dict of stats
        """
        stats = {
            "queries": self.queries,
            "decomposed": self.decomposed,
            "out_of_range": self.out_of_range,
        }
        return stats
