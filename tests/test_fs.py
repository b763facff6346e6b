import errno
import os
import stat
import struct

import pytest

llfuse = pytest.importorskip("llfuse")

from dspfs.commons import FILE_INODE, ROOT_INODE  # noqa: E402
from dspfs.config import MountConfig  # noqa: E402
from dspfs.fs import DspOperations, fuse_errors  # noqa: E402
from dspfs.errors import InvalidArgument  # noqa: E402
from dspfs.source import SampleSource  # noqa: E402

FILENAME = "samples.cs16"


def make_operations(tmp_path, content: bytes = b"\x00\x00\xff\x7f") -> DspOperations:
    filename = tmp_path / FILENAME
    with open(filename, "wb") as f:
        f.write(content)
    source = SampleSource.open(str(filename))
    return DspOperations(source, MountConfig(file_name=FILENAME))


def test_getattr(tmp_path):
    ops = make_operations(tmp_path)
    attr = ops.getattr(ROOT_INODE)
    assert stat.S_ISDIR(attr.st_mode)
    assert attr.st_nlink == 2
    attr = ops.getattr(FILE_INODE)
    assert stat.S_ISREG(attr.st_mode)
    assert stat.S_IMODE(attr.st_mode) == 0o400
    assert attr.st_size == 8
    assert attr.attr_timeout == 1
    with pytest.raises(llfuse.FUSEError) as ex:
        ops.getattr(3)
    assert ex.value.errno == errno.ENOENT


def test_getattr_empty(tmp_path):
    ops = make_operations(tmp_path, b"")
    assert ops.getattr(FILE_INODE).st_size == 0
    assert ops.read(FILE_INODE, 0, 4096) == b""


def test_lookup(tmp_path):
    ops = make_operations(tmp_path)
    assert ops.lookup(ROOT_INODE, FILENAME.encode()).st_ino == FILE_INODE
    # Only the sample file name resolves
    for parent, name in [
        (ROOT_INODE, b"."),
        (ROOT_INODE, b".."),
        (ROOT_INODE, b"other"),
        (FILE_INODE, FILENAME.encode()),
        (7, FILENAME.encode()),
    ]:
        with pytest.raises(llfuse.FUSEError) as ex:
            ops.lookup(parent, name)
        assert ex.value.errno == errno.ENOENT


def test_open(tmp_path):
    ops = make_operations(tmp_path)
    assert ops.open(FILE_INODE, os.O_RDONLY) == FILE_INODE
    with pytest.raises(llfuse.FUSEError) as ex:
        ops.open(FILE_INODE, os.O_RDWR)
    assert ex.value.errno == errno.EACCES
    with pytest.raises(llfuse.FUSEError) as ex:
        ops.open(ROOT_INODE, os.O_RDONLY)
    assert ex.value.errno == errno.EISDIR
    with pytest.raises(llfuse.FUSEError) as ex:
        ops.open(5, os.O_RDONLY)
    assert ex.value.errno == errno.ENOENT


def test_read(tmp_path):
    ops = make_operations(tmp_path)
    fh = ops.open(FILE_INODE, os.O_RDONLY)
    assert ops.read(fh, 0, 8) == struct.pack("=2f", 0.0, 1.0)
    assert ops.read(fh, 4, 4096) == struct.pack("=f", 1.0)
    assert ops.read(fh, 8, 4096) == b""
    with pytest.raises(llfuse.FUSEError) as ex:
        ops.read(fh, -4, 4)
    assert ex.value.errno == errno.EINVAL
    with pytest.raises(llfuse.FUSEError) as ex:
        ops.read(9, 0, 4)
    assert ex.value.errno == errno.ENOENT
    # Only the sample file can be read
    with pytest.raises(llfuse.FUSEError) as ex:
        ops.read(ROOT_INODE, 0, 4)
    assert ex.value.errno == errno.ENOENT


def test_readdir(tmp_path):
    ops = make_operations(tmp_path)
    fh = ops.opendir(ROOT_INODE)
    entries = list(ops.readdir(fh, 0))
    assert [x[0] for x in entries] == [b".", b"..", FILENAME.encode()]
    assert [x[2] for x in entries] == [1, 2, 3]
    assert entries[2][1].st_ino == FILE_INODE
    assert [x[0] for x in ops.readdir(fh, 2)] == [FILENAME.encode()]
    assert list(ops.readdir(fh, 3)) == []
    with pytest.raises(llfuse.FUSEError) as ex:
        ops.opendir(FILE_INODE)
    assert ex.value.errno == errno.ENOTDIR
    with pytest.raises(llfuse.FUSEError) as ex:
        list(ops.readdir(FILE_INODE, 0))
    assert ex.value.errno == errno.ENOENT


def test_access(tmp_path):
    ops = make_operations(tmp_path)
    assert ops.access(FILE_INODE, os.R_OK)
    assert not ops.access(FILE_INODE, os.W_OK)


def test_statfs(tmp_path):
    ops = make_operations(tmp_path)
    st = ops.statfs()
    assert st.f_files == 2
    assert st.f_bfree == 0


def test_fuse_errors():
    with pytest.raises(llfuse.FUSEError) as ex:
        with fuse_errors():
            raise InvalidArgument()
    assert ex.value.errno == errno.EINVAL
    with pytest.raises(llfuse.FUSEError) as ex:
        with fuse_errors():
            raise OSError()
    assert ex.value.errno == errno.EIO
