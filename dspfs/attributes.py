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

import stat
import typing as t
from dataclasses import dataclass

from .commons import DIRECTORY_BLOCK_SIZE, FILE_INODE, RATIO, ROOT_INODE
from .source import PhysicalMetadata

__all__ = [
    "VirtualAttributes",
    "compute_attributes",
    "directory_attributes",
    "FILE_PERMISSIONS",
    "DIRECTORY_PERMISSIONS",
]

FILE_PERMISSIONS = 0o400  # r--------
DIRECTORY_PERMISSIONS = 0o555  # r-xr-xr-x


@dataclass(frozen=True)
class VirtualAttributes:
    inode: int
    mode: int  # File type and permissions
    size: int  # Size in bytes
    blocks: int  # Number of 512 bytes blocks
    atime_ns: int
    mtime_ns: int
    ctime_ns: int
    nlink: int
    uid: int = 0
    gid: int = 0
    rdev: int = 0
    blksize: int = DIRECTORY_BLOCK_SIZE

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def permissions(self) -> int:
        return stat.S_IMODE(self.mode)

    def as_dict(self) -> t.Dict[str, int]:
        """
        Attributes as a stat-like dictionary
        """
        return {
            "st_ino": self.inode,
            "st_mode": self.mode,
            "st_size": self.size,
            "st_blocks": self.blocks,
            "st_atime_ns": self.atime_ns,
            "st_mtime_ns": self.mtime_ns,
            "st_ctime_ns": self.ctime_ns,
            "st_nlink": self.nlink,
            "st_uid": self.uid,
            "st_gid": self.gid,
            "st_rdev": self.rdev,
            "st_blksize": self.blksize,
        }


def compute_attributes(metadata: PhysicalMetadata, inode: int = FILE_INODE) -> VirtualAttributes:
    """
    Attributes of the converted file, derived from the backing file metadata
    """
    return VirtualAttributes(
        inode=inode,
        mode=stat.S_IFREG | FILE_PERMISSIONS,
        size=metadata.size * RATIO,
        blocks=metadata.blocks * RATIO,
        atime_ns=metadata.atime_ns,
        mtime_ns=metadata.mtime_ns,
        ctime_ns=metadata.ctime_ns,
        nlink=metadata.nlink,
        uid=metadata.uid,
        gid=metadata.gid,
        rdev=metadata.rdev,
        blksize=metadata.blksize,
    )


def directory_attributes(inode: int = ROOT_INODE) -> VirtualAttributes:
    """
    Constant attributes of the root directory
    """
    return VirtualAttributes(
        inode=inode,
        mode=stat.S_IFDIR | DIRECTORY_PERMISSIONS,
        size=0,
        blocks=0,
        atime_ns=0,
        mtime_ns=0,
        ctime_ns=0,
        nlink=2,
    )
