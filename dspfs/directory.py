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

import typing as t

from .commons import FILE_INODE, ROOT_INODE
from .namespace import EntryKind

__all__ = [
    "DirectoryItem",
    "enumerate_directory",
]

# inode, next offset, kind, name
DirectoryItem = t.Tuple[int, int, EntryKind, str]


def enumerate_directory(file_name: str, start_offset: int = 0) -> t.Iterator[DirectoryItem]:
    """
    List the root directory starting at the given offset.
    Each item carries the offset of the next one, so a listing
    can be resumed where the caller stopped.
    """
    entries = [
        (ROOT_INODE, EntryKind.DIRECTORY, "."),
        (ROOT_INODE, EntryKind.DIRECTORY, ".."),
        (FILE_INODE, EntryKind.REGULAR_FILE, file_name),
    ]
    for i, (inode, kind, name) in enumerate(entries):
        if i < start_offset:
            continue
        yield inode, i + 1, kind, name
