NIBBLE_TO_HEX = "0123456789abcdef"

HEX_TO_NIBBLE = {c: i for i, c in enumerate(NIBBLE_TO_HEX)}
HEX_TO_NIBBLE.update({c.upper(): i for c, i in HEX_TO_NIBBLE.items()})


def hex_to_nibbles(key):
    """Decompose a hex key into its nibbles.

    Characters that aren't hex digits are silently dropped, so "a1g" yields the
    same nibbles as "a1". An empty result is valid and refers to the root.

    Args:
        key (str): The key to decompose.

    Raises:
        ValueError: If the key is not a str.

    Returns:
        Iterator[int]: The nibble values (0-15), in key order.
    """
    if not isinstance(key, str):
        raise ValueError(f'Key "{key}" must be of str type, not "{type(key)}"')
    return (HEX_TO_NIBBLE[c] for c in key if c in HEX_TO_NIBBLE)


def nibbles_to_hex(nibbles):
    """Convert nibbles back into a lowercase hex key.

    Raises:
        ValueError: If any nibble is outside 0-15.
    """
    chars = []
    for nibble in nibbles:
        if not (isinstance(nibble, int) and 0 <= nibble < 16):
            raise ValueError(f"Invalid nibble: {nibble!r}")
        chars.append(NIBBLE_TO_HEX[nibble])
    return "".join(chars)


def int_to_nibbles(number):
    """
    Most significant nibble first, no leading zeros

    Notes:
    - 0 has no nibbles, so it lands on the root
    """
    if number < 0:
        raise ValueError(f"Cannot convert negative number to nibbles: {number}")
    nibbles = []
    while number > 0:
        nibbles.append(number & 15)
        number >>= 4
    nibbles.reverse()
    return nibbles


def canonical_key(key):
    """Used for normalizing keys, e.g. "A1-G" becomes "a1" """
    return nibbles_to_hex(hex_to_nibbles(key))
