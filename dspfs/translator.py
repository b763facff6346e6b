# Copyright (C) 2026 The dspfs developers

# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to
# deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
# sell copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.

import logging
from dataclasses import dataclass

from .commons import RATIO, convert_samples
from .errors import InvalidArgument
from .source import SampleSource

__all__ = [
    "ReadWindow",
    "Translator",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadWindow:
    """
    A logical (float32) read request mapped to the physical (int16) file
    """

    logical_offset: int
    requested_length: int
    physical_offset: int
    physical_length: int

    @property
    def logical_length(self) -> int:
        """
        Length of the converted data, may be shorter than requested near EOF
        """
        return self.physical_length * RATIO

    @property
    def is_eof(self) -> bool:
        return self.physical_length == 0


class Translator:
    """
    Translate reads of the converted file into reads of the sample file

    Logical offsets and lengths are expected to be multiples of the
    converted sample size; misaligned values are floored.
    """

    def __init__(self, source: SampleSource):
        self.source = source

    def window(self, offset: int, length: int) -> ReadWindow:
        """
        Map a logical request to a physical byte range
        """
        if offset < 0:
            raise InvalidArgument(f"Negative offset {offset}")
        physical_offset = offset // RATIO
        wanted = max(length, 0) // RATIO
        remaining = max(self.source.get_size() - physical_offset, 0)
        return ReadWindow(
            logical_offset=offset,
            requested_length=length,
            physical_offset=physical_offset,
            physical_length=min(wanted, remaining),
        )

    def read(self, offset: int, length: int) -> bytes:
        """
        Read converted samples, a short result means end of file
        """
        w = self.window(offset, length)
        if w.is_eof:
            return b""
        data = self.source.read_physical(w.physical_offset, w.physical_length)
        result = convert_samples(data)
        logger.debug(
            "read offset=%d size=%d -> physical offset=%d length=%d, %d bytes",
            offset,
            length,
            w.physical_offset,
            w.physical_length,
            len(result),
        )
        return result
