from glyphramp.errors import InvalidPalette

# Ordered lightest to densest
SIMPLE = " .:-=+*#%@"

DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Block elements: space then light, medium, dark shade and full block
BLOCKS = " " + "".join(chr(i) for i in (0x2591, 0x2592, 0x2593, 0x2588))

# Indexed by the CLI charset number
CHARSETS = (SIMPLE, DETAILED, BLOCKS)


def charset(number: int) -> str:
    if not 0 <= number < len(CHARSETS):
        raise InvalidPalette(f"Unknown charset {number}, expected 0-{len(CHARSETS) - 1}")
    return CHARSETS[number]
