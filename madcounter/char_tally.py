"""Character frequency and first-position tally over a byte stream."""

import logging
from typing import BinaryIO, Optional

from .config import config
from .errors import CharacterRangeError
from .models import ASCII_RANGE, CharacterTally

logger = logging.getLogger(__name__)


def tally_characters(stream: BinaryIO, chunk_size: Optional[int] = None) -> CharacterTally:
    """
    Count every byte of ``stream`` from offset zero in one forward pass.

    The input must be 7-bit clean. A byte value of 128 or above raises
    CharacterRangeError naming the value and its offset; it is not folded
    into the table.

    The stream is rewound before scanning, so the caller may reuse it for
    other analyses afterwards as long as those also start from zero.
    """
    chunk_size = chunk_size or config.READ_CHUNK_SIZE
    tally = CharacterTally()
    frequency = tally.frequency
    first_position = tally.first_position
    position = 0

    stream.seek(0)
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        for value in chunk:
            if value >= ASCII_RANGE:
                raise CharacterRangeError(value, position)
            if frequency[value] == 0:
                first_position[value] = position
                tally.unique_count += 1
            frequency[value] += 1
            position += 1

    tally.total_count = position
    logger.debug("Tallied %d bytes, %d unique", tally.total_count, tally.unique_count)
    return tally
