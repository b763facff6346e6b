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
from dataclasses import dataclass
from enum import Enum

from .attributes import VirtualAttributes, directory_attributes
from .commons import FILE_INODE, ROOT_INODE
from .errors import NotFound

__all__ = [
    "EntryKind",
    "VirtualEntry",
    "InodeNamespace",
]


class EntryKind(Enum):
    DIRECTORY = "DIRECTORY"
    REGULAR_FILE = "REGULAR_FILE"


@dataclass(frozen=True)
class VirtualEntry:
    inode: int
    kind: EntryKind
    name: str

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIRECTORY


class InodeNamespace:
    """
    Inode table of the virtual filesystem

    The table is indexed by inode; names are resolved through a
    per-directory index. Today it holds the root directory and
    the converted file only.
    """

    entries: t.Dict[int, VirtualEntry]  # inode -> entry
    attributes: t.Dict[int, VirtualAttributes]  # inode -> attributes
    children: t.Dict[int, t.Dict[str, int]]  # parent inode -> name -> inode

    def __init__(self, file_name: str, file_attributes: VirtualAttributes):
        self.entries = {}
        self.attributes = {}
        self.children = {}
        self.register(VirtualEntry(ROOT_INODE, EntryKind.DIRECTORY, "/"), directory_attributes(ROOT_INODE))
        self.register(
            VirtualEntry(FILE_INODE, EntryKind.REGULAR_FILE, file_name),
            file_attributes,
            parent=ROOT_INODE,
        )

    def register(
        self,
        entry: VirtualEntry,
        attributes: VirtualAttributes,
        parent: t.Optional[int] = None,
    ) -> None:
        """
        Add an entry to the table
        """
        if entry.inode in self.entries:
            raise ValueError(f"Inode {entry.inode} already registered")
        self.entries[entry.inode] = entry
        self.attributes[entry.inode] = attributes
        if entry.is_dir:
            self.children[entry.inode] = {}
        if parent is not None:
            self.children[parent][entry.name] = entry.inode

    @property
    def root(self) -> VirtualEntry:
        return self.entries[ROOT_INODE]

    @property
    def file(self) -> VirtualEntry:
        return self.entries[FILE_INODE]

    def lookup(self, parent_id: int, name: str) -> VirtualEntry:
        """
        Resolve a name in a directory
        """
        try:
            return self.entries[self.children[parent_id][name]]
        except KeyError:
            raise NotFound(name)

    def get_entry(self, inode: int) -> VirtualEntry:
        try:
            return self.entries[inode]
        except KeyError:
            raise NotFound(str(inode))

    def get_attributes(self, inode: int) -> VirtualAttributes:
        try:
            return self.attributes[inode]
        except KeyError:
            raise NotFound(str(inode))

    def __contains__(self, inode: object) -> bool:
        return inode in self.entries
