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

import contextlib
import errno
import logging
import os
import typing as t

import llfuse

from .attributes import VirtualAttributes, compute_attributes
from .commons import FILE_INODE, ROOT_INODE
from .config import MountConfig
from .directory import enumerate_directory
from .errors import NotFound
from .namespace import InodeNamespace, VirtualEntry
from .source import SampleSource
from .translator import Translator

__all__ = [
    "DspOperations",
    "fuse_errors",
    "mount",
]

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def fuse_errors() -> t.Iterator[None]:
    """
    Report OSError as a FUSE error reply
    """
    try:
        yield
    except OSError as ex:
        raise llfuse.FUSEError(ex.errno or errno.EIO) from ex


class DspOperations(llfuse.Operations):  # type: ignore
    """
    Read-only filesystem exposing the sample file converted to float32.
    Operations not implemented here get the llfuse default ENOSYS reply.
    """

    def __init__(self, source: SampleSource, config: MountConfig):
        super().__init__()
        self.source = source
        self.config = config
        self.namespace = InodeNamespace(config.file_name, compute_attributes(source.metadata))
        self.translator = Translator(source)

    def make_entry_attributes(self, attributes: VirtualAttributes) -> llfuse.EntryAttributes:
        entry = llfuse.EntryAttributes()
        for k, v in attributes.as_dict().items():
            setattr(entry, k, v)
        entry.generation = 0
        entry.attr_timeout = self.config.attr_timeout
        entry.entry_timeout = self.config.entry_timeout
        return entry

    def _resolve(self, parent_inode: int, name: bytes) -> VirtualEntry:
        return self.namespace.lookup(parent_inode, os.fsdecode(name))

    def lookup(self, parent_inode: int, name: bytes, ctx: t.Any = None) -> llfuse.EntryAttributes:
        logger.debug("lookup parent=%d name=%r", parent_inode, name)
        with fuse_errors():
            entry = self._resolve(parent_inode, name)
            return self.make_entry_attributes(self.namespace.get_attributes(entry.inode))

    def getattr(self, inode: int, ctx: t.Any = None) -> llfuse.EntryAttributes:
        logger.debug("getattr inode=%d", inode)
        with fuse_errors():
            return self.make_entry_attributes(self.namespace.get_attributes(inode))

    def access(self, inode: int, mode: int, ctx: t.Any = None) -> bool:
        with fuse_errors():
            self.namespace.get_entry(inode)
        return not (mode & os.W_OK)

    def open(self, inode: int, flags: int, ctx: t.Any = None) -> int:
        logger.debug("open inode=%d flags=%o", inode, flags)
        with fuse_errors():
            entry = self.namespace.get_entry(inode)
        if entry.is_dir:
            raise llfuse.FUSEError(errno.EISDIR)
        if flags & os.O_ACCMODE != os.O_RDONLY:
            raise llfuse.FUSEError(errno.EACCES)
        return inode

    def read(self, fh: int, off: int, size: int) -> bytes:
        logger.debug("read inode=%d offset=%d size=%d", fh, off, size)
        with fuse_errors():
            if fh != FILE_INODE:
                raise NotFound(str(fh))
            return self.translator.read(off, size)

    def release(self, fh: int) -> None:
        pass

    def opendir(self, inode: int, ctx: t.Any = None) -> int:
        with fuse_errors():
            entry = self.namespace.get_entry(inode)
        if not entry.is_dir:
            raise llfuse.FUSEError(errno.ENOTDIR)
        return inode

    def readdir(self, fh: int, off: int) -> t.Iterator[t.Tuple[bytes, llfuse.EntryAttributes, int]]:
        logger.debug("readdir inode=%d offset=%d", fh, off)
        if fh != ROOT_INODE:
            raise llfuse.FUSEError(errno.ENOENT)
        for inode, next_offset, _, name in enumerate_directory(self.config.file_name, off):
            attributes = self.make_entry_attributes(self.namespace.get_attributes(inode))
            yield os.fsencode(name), attributes, next_offset

    def releasedir(self, fh: int) -> None:
        pass

    def statfs(self, ctx: t.Any = None) -> llfuse.StatvfsData:
        attributes = self.namespace.get_attributes(FILE_INODE)
        st = llfuse.StatvfsData()
        st.f_bsize = attributes.blksize
        st.f_frsize = 512
        st.f_blocks = attributes.blocks
        st.f_bfree = 0
        st.f_bavail = 0
        st.f_files = len(self.namespace.entries)
        st.f_ffree = 0
        st.f_favail = 0
        st.f_namemax = 255
        return st


def mount(source: SampleSource, mountpoint: str, config: MountConfig) -> None:
    """
    Mount the filesystem and serve requests until unmounted
    """
    options = set(llfuse.default_options)
    options |= config.fuse_options
    operations = DspOperations(source, config)
    llfuse.init(operations, mountpoint, options)
    try:
        llfuse.main(workers=config.workers)
    finally:
        llfuse.close()
