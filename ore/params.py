"""
Parameters for the ORE byte-domain scheme.

The domain is fixed at [0, 256):
- Plaintexts, keys, permutation entries and comparison bytes are all bytes
- A left token is 2 bytes (offset, key), i.e. 4 hex characters
- A right token is DOMAIN_SIZE bytes, i.e. 2 * DOMAIN_SIZE hex characters
"""

DOMAIN_SIZE = 256

LEFT_TOKEN_SIZE = 2
LEFT_TOKEN_HEX_LEN = 2 * LEFT_TOKEN_SIZE
RIGHT_TOKEN_SIZE = DOMAIN_SIZE
RIGHT_TOKEN_HEX_LEN = 2 * RIGHT_TOKEN_SIZE


def check_domain_value(value: int, name: str = "value") -> int:
    """
    Validate that value is a domain value.

    Args:
        value: Integer to check
        name: Name used in the error message

    Returns:
        value, unchanged

    Raises:
        ValueError: If value is not an int in [0, DOMAIN_SIZE)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value >= DOMAIN_SIZE:
        raise ValueError(f"{name} {value} out of range [0, {DOMAIN_SIZE})")
    return value
