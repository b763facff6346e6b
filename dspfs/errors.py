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
import os

__all__ = [
    "NotFound",
    "InvalidArgument",
    "StartupFailure",
]


class NotFound(FileNotFoundError):
    """Unknown inode or unmatched name"""

    def __init__(self, what: str = "") -> None:
        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), what or None)


class InvalidArgument(OSError):
    """Invalid request argument, e.g. a negative offset"""

    def __init__(self, message: str = "") -> None:
        super().__init__(errno.EINVAL, message or os.strerror(errno.EINVAL))


class StartupFailure(OSError):
    """
    The backing sample file cannot be opened or examined.
    Raised before any mount attempt; it is fatal.
    """
