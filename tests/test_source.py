import errno
import os

import pytest

from dspfs.errors import InvalidArgument, StartupFailure
from dspfs.source import SampleSource


def write_file(path, content: bytes) -> str:
    with open(path, "wb") as f:
        f.write(content)
    return str(path)


def test_open_missing(tmp_path):
    with pytest.raises(StartupFailure) as ex:
        SampleSource.open(str(tmp_path / "missing.cs16"))
    assert ex.value.errno == errno.ENOENT


def test_open_directory(tmp_path):
    with pytest.raises(StartupFailure):
        SampleSource.open(str(tmp_path))


def test_metadata(tmp_path):
    filename = write_file(tmp_path / "x.cs16", b"\x01\x00" * 100)
    st = os.stat(filename)
    with SampleSource.open(filename) as source:
        assert source.get_size() == 200
        assert source.metadata.size == 200
        assert source.metadata.mtime_ns == st.st_mtime_ns
        assert source.metadata.uid == st.st_uid
        assert source.metadata.nlink == st.st_nlink
        assert str(source) == os.path.abspath(filename)


def test_metadata_snapshot(tmp_path):
    filename = write_file(tmp_path / "x.cs16", b"\x00" * 8)
    with SampleSource.open(filename) as source:
        with open(filename, "ab") as f:
            f.write(b"\x00" * 8)
        # Size is not refreshed
        assert source.get_size() == 8
        assert len(source.read_physical(0, 100)) == 8


def test_read_physical(tmp_path):
    content = bytes(range(256))
    filename = write_file(tmp_path / "x.cs16", content)
    with SampleSource.open(filename) as source:
        assert source.read_physical(0, 16) == content[:16]
        assert source.read_physical(100, 10) == content[100:110]
        # Clamped at the end of file
        assert source.read_physical(250, 100) == content[250:]
        # At or past the end of file
        assert source.read_physical(256, 10) == b""
        assert source.read_physical(1000, 10) == b""
        assert source.read_physical(0, 0) == b""
        # Negative values
        with pytest.raises(InvalidArgument):
            source.read_physical(-1, 10)
        with pytest.raises(InvalidArgument):
            source.read_physical(0, -1)


def test_close(tmp_path):
    filename = write_file(tmp_path / "x.cs16", b"")
    source = SampleSource.open(filename)
    source.close()
    source.close()
    assert source.fd == -1
