# no valid address is wider than 20 decimal digits (2^63 has 19)
MAX_ADDRESS_DIGITS = 20
# stands in for any wider token, too large for every address space
OVERSIZE_ADDRESS = 10 ** MAX_ADDRESS_DIGITS


def is_unsigned_decimal(token):
    return token.isascii() and token.isdigit()


def decimal_to_int(token):
    """
    Convert an unsigned decimal token, mapping tokens too wide for any address to OVERSIZE_ADDRESS
    :param token: str of ASCII digits
    :return: int
    """
    digits = token.lstrip("0") or "0"
    if len(digits) > MAX_ADDRESS_DIGITS:
        return OVERSIZE_ADDRESS
    return int(digits)


class AddressReader:
    """
    Lazily reads a stream and yields one virtual address per decimal token.
    Stops at end of input or at the first token that is not an unsigned decimal.
    """
    def __init__(self, stream):
        self.stream = stream
        self.stopped_on = None

    def __iter__(self):
        # iterate over each line, a line may hold several addresses
        for line in self.stream:
            for token in line.split():
                if not is_unsigned_decimal(token):
                    self.stopped_on = token
                    return
                yield decimal_to_int(token)
