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

import errno
import logging
import os
import stat
import typing as t
from dataclasses import dataclass

from .errors import InvalidArgument, StartupFailure

__all__ = [
    "PhysicalMetadata",
    "SampleSource",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhysicalMetadata:
    size: int  # Size in bytes
    blocks: int  # Number of 512 bytes blocks allocated
    atime_ns: int  # Last access time
    mtime_ns: int  # Last modification time
    ctime_ns: int  # Last status change time
    uid: int  # Owner user id
    gid: int  # Owner group id
    nlink: int  # Number of hard links
    rdev: int  # Device id (if special file)
    blksize: int  # Preferred I/O block size

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "PhysicalMetadata":
        return cls(
            size=st.st_size,
            blocks=getattr(st, "st_blocks", 0),
            atime_ns=st.st_atime_ns,
            mtime_ns=st.st_mtime_ns,
            ctime_ns=st.st_ctime_ns,
            uid=st.st_uid,
            gid=st.st_gid,
            nlink=st.st_nlink,
            rdev=getattr(st, "st_rdev", 0),
            blksize=getattr(st, "st_blksize", 512),
        )


class SampleSource:
    """
    Read-only access to the backing sample file.

    Metadata is captured once when the file is opened and never refreshed.
    Reads are positional, so concurrent requests don't share a file cursor.
    """

    fd: int
    metadata: PhysicalMetadata

    def __init__(self, filename: str, fd: int, metadata: PhysicalMetadata):
        self.filename = filename
        self.fd = fd
        self.metadata = metadata

    @classmethod
    def open(cls, filename: str) -> "SampleSource":
        """
        Open the file for reading and snapshot its metadata
        """
        filename = os.path.abspath(filename)
        try:
            fd = os.open(filename, os.O_RDONLY)
        except OSError as ex:
            raise StartupFailure(ex.errno, f"couldn't open {filename}: {ex.strerror}", filename) from ex
        try:
            st = os.fstat(fd)
        except OSError as ex:
            os.close(fd)
            raise StartupFailure(ex.errno, f"couldn't stat {filename}: {ex.strerror}", filename) from ex
        if not stat.S_ISREG(st.st_mode):
            os.close(fd)
            raise StartupFailure(errno.EINVAL, f"not a regular file: {filename}", filename)
        metadata = PhysicalMetadata.from_stat(st)
        logger.debug("Opened %s, %d bytes", filename, metadata.size)
        return cls(filename, fd, metadata)

    def read_physical(self, offset: int, length: int) -> bytes:
        """
        Read up to length bytes starting at offset.
        Reading at or past the end of file returns fewer (or zero) bytes.
        """
        if offset < 0 or length < 0:
            raise InvalidArgument(f"Invalid range offset={offset} length={length}")
        size = self.get_size()
        if offset >= size or length == 0:
            return b""
        length = min(length, size - offset)
        data = bytearray()
        while len(data) < length:
            chunk = os.pread(self.fd, length - len(data), offset + len(data))
            if not chunk:
                break
            data.extend(chunk)
        return bytes(data)

    def get_size(self) -> int:
        """
        Get file size in bytes
        """
        return self.metadata.size

    def close(self) -> None:
        """
        Close the file
        """
        if self.fd >= 0:
            os.close(self.fd)
            self.fd = -1

    def __enter__(self) -> "SampleSource":
        return self

    def __exit__(self, *args: t.Any) -> None:
        self.close()

    def __str__(self) -> str:
        return self.filename
