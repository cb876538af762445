"""
Roland SysEx checksum utilities.

Roland Data Set 1 (DT1) messages end with a checksum byte calculated as:
1. Sum all address and data bytes
2. Take the lower 7 bits of the sum
3. Subtract from 128 (0x80)
4. If result is 128 (0x80), use 0 instead

GS Reset is a DT1 message, so its last data byte before F7 is this
checksum (0x41 for address 40 00 7F, data 00).
"""

from typing import List, Union


def calculate_roland_checksum(data: Union[bytes, List[int]]) -> int:
    """
    Calculate Roland checksum over address and data bytes.

    Args:
        data: Address bytes followed by data bytes

    Returns:
        Checksum value (0-127)

    Example:
        >>> calculate_roland_checksum([0x40, 0x00, 0x7F, 0x00])
        65
    """
    total_7bit = sum(data) & 0x7F
    return (128 - total_7bit) & 0x7F
