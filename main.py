from address_reader import AddressReader
from address_space import ConfigError, QuerySession, compute_layout
from address_space.config import page_size_from_kb
import argparse
import logging
import os
import sys

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="address-space",
        description="Virtual address space layout calculator"
    )
    parser.add_argument(
        "page_table_type",
        type=int,
        help="1 for a single-level page table, 2 for a two-level page table",
    )
    parser.add_argument(
        "address_bits",
        type=int,
        help="number of bits in a virtual address (8-63)",
    )
    parser.add_argument(
        "page_size_kb",
        type=int,
        help="page size in KB, a power of two between 1 and 512",
    )
    parser.add_argument(
        "-i", "--input",
        default="-",  # default to stdin
        help='File of decimal virtual addresses (use "-" or omit to read from stdin; default: "%(default)s")',
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only print address breakdowns, no layout summary or prompts",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    use_stdin = (args.input == "-")

    # validation
    if not use_stdin and not os.path.exists(args.input):
        print(f"error: input file not found: {args.input}", file=sys.stderr)
        return 2

    try:
        layout = compute_layout(args.page_table_type, args.address_bits, page_size_from_kb(args.page_size_kb))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.debug("computed layout %r", layout)

    if not args.quiet:
        print(layout, end="")
    session = QuerySession(layout, out=sys.stdout, prompt=not args.quiet)
    if use_stdin:
        reader = AddressReader(sys.stdin)
        stats = session.run(reader)
    else:
        with open(args.input) as infile:
            reader = AddressReader(infile)
            stats = session.run(reader)
    if reader.stopped_on is not None:
        logger.debug("stopped reading at non-numeric input %r", reader.stopped_on)
    logger.debug("stats: %s", stats)
    return 0


if __name__ == '__main__':
    sys.exit(main())
