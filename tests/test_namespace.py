import pytest

from dspfs.attributes import compute_attributes
from dspfs.commons import FILE_INODE, ROOT_INODE
from dspfs.errors import NotFound
from dspfs.namespace import EntryKind, InodeNamespace, VirtualEntry
from dspfs.source import PhysicalMetadata

FILENAME = "samples.cs16"


def make_namespace() -> InodeNamespace:
    metadata = PhysicalMetadata(
        size=4, blocks=1, atime_ns=0, mtime_ns=0, ctime_ns=0, uid=0, gid=0, nlink=1, rdev=0, blksize=4096
    )
    return InodeNamespace(FILENAME, compute_attributes(metadata))


def test_lookup():
    ns = make_namespace()
    entry = ns.lookup(ROOT_INODE, FILENAME)
    assert entry.inode == FILE_INODE
    assert entry.kind == EntryKind.REGULAR_FILE
    assert entry.name == FILENAME
    assert ns.file == entry
    assert ns.root.is_dir


def test_lookup_not_found():
    ns = make_namespace()
    with pytest.raises(NotFound):
        ns.lookup(ROOT_INODE, "other.cs16")
    with pytest.raises(NotFound):
        ns.lookup(ROOT_INODE, FILENAME.upper())
    # Not a directory
    with pytest.raises(NotFound):
        ns.lookup(FILE_INODE, FILENAME)
    # Unknown parent
    with pytest.raises(NotFound):
        ns.lookup(42, FILENAME)
    # NotFound is a FileNotFoundError
    with pytest.raises(FileNotFoundError):
        ns.lookup(ROOT_INODE, "")


def test_get_attributes():
    ns = make_namespace()
    assert ns.get_attributes(ROOT_INODE).is_dir
    assert ns.get_attributes(FILE_INODE).size == 8
    for inode in (0, 3, -1, 1000):
        with pytest.raises(NotFound):
            ns.get_attributes(inode)
        with pytest.raises(NotFound):
            ns.get_entry(inode)
        assert inode not in ns
    assert ROOT_INODE in ns
    assert FILE_INODE in ns


def test_register():
    ns = make_namespace()
    with pytest.raises(ValueError):
        ns.register(VirtualEntry(FILE_INODE, EntryKind.REGULAR_FILE, "x"), ns.get_attributes(FILE_INODE))
    ns.register(
        VirtualEntry(3, EntryKind.REGULAR_FILE, "second.cs16"),
        ns.get_attributes(FILE_INODE),
        parent=ROOT_INODE,
    )
    assert ns.lookup(ROOT_INODE, "second.cs16").inode == 3
