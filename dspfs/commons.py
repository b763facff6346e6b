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

__all__ = [
    "RATIO",
    "ROOT_INODE",
    "FILE_INODE",
    "SAMPLE_SIZE",
    "FLOAT_SIZE",
    "SCALE",
    "DIRECTORY_BLOCK_SIZE",
    "bytes_to_samples",
    "sample_to_float",
    "samples_to_floats",
    "convert_samples",
]

import struct
import typing as t

ROOT_INODE = 1  # Root directory inode
FILE_INODE = 2  # Converted sample file inode
SAMPLE_SIZE = 2  # Size of a source sample (int16) in bytes
FLOAT_SIZE = 4  # Size of a converted sample (float32) in bytes
RATIO = FLOAT_SIZE // SAMPLE_SIZE  # Logical bytes per physical byte
SCALE = 32767.0  # Full scale of a signed 16-bit sample
DIRECTORY_BLOCK_SIZE = 512

_INT16_LE = struct.Struct("<h")
_FLOAT32 = struct.Struct("=f")


def bytes_to_samples(data: bytes) -> t.List[int]:
    """
    Decode little-endian signed 16-bit samples.
    A trailing odd byte is not a complete sample and is ignored.
    """
    count = len(data) // SAMPLE_SIZE
    return [_INT16_LE.unpack_from(data, i * SAMPLE_SIZE)[0] for i in range(count)]


def sample_to_float(sample: int) -> bytes:
    """
    Scale a signed 16-bit sample and encode it as a native float32
    """
    if not -32768 <= sample <= 32767:
        raise ValueError(f"Sample out of range: {sample}")
    # -32768 maps slightly below -1.0, not clamped
    return _FLOAT32.pack(sample / SCALE)


def samples_to_floats(samples: t.Iterable[int]) -> bytes:
    """
    Encode a sequence of samples as consecutive native float32 values
    """
    buffer = bytearray()
    for sample in samples:
        buffer.extend(sample_to_float(sample))
    return bytes(buffer)


def convert_samples(data: bytes) -> bytes:
    """
    Convert raw int16 LE sample bytes to native float32 sample bytes.
    The output is RATIO times the input length, a trailing partial
    sample is zero filled.
    """
    result = samples_to_floats(bytes_to_samples(data))
    return result + b"\x00" * (RATIO * len(data) - len(result))
