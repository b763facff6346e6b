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

__all__ = [
    "FSNAME",
    "TTL",
    "MountConfig",
]

FSNAME = "fuse_dsp"  # Filesystem label
TTL = 1.0  # Attribute and entry cache validity, in seconds


@dataclass(frozen=True)
class MountConfig:
    """
    Mount configuration, built once at startup
    """

    file_name: str  # Name of the converted file in the root directory
    fsname: str = FSNAME
    attr_timeout: float = TTL
    entry_timeout: float = TTL
    read_only: bool = True
    debug: bool = False  # Enable FUSE debug output
    workers: t.Optional[int] = None  # Number of worker threads (None = llfuse default)

    @property
    def fuse_options(self) -> t.Set[str]:
        """
        Mount options, in addition to the llfuse defaults
        """
        options = {f"fsname={self.fsname}"}
        if self.read_only:
            options.add("ro")
        if self.debug:
            options.add("debug")
        return options
