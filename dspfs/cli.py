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

import argparse
import logging
import os
import sys
import typing as t

from .config import MountConfig
from .errors import StartupFailure
from .source import SampleSource

__all__ = [
    "main",
    "parse_args",
]

logger = logging.getLogger(__name__)


def parse_args(argv: t.Optional[t.List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="A FUSE filesystem that converts a cs16 sample file to cf32 on the fly",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="display verbose output",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=False,
        help="enable FUSE debug output",
    )
    parser.add_argument(
        "file",
        help="the cs16 formatted file to convert",
    )
    parser.add_argument(
        "mount_point",
        help="the FUSE mount point",
    )
    return parser.parse_args(argv)


def main(argv: t.Optional[t.List[str]] = None) -> int:
    options = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        source = SampleSource.open(options.file)
    except StartupFailure as ex:
        logger.error("%s", ex.strerror)
        return 1
    config = MountConfig(file_name=os.path.basename(source.filename), debug=options.debug)
    logger.info("Mounting %s on %s", source, options.mount_point)
    from .fs import mount

    try:
        mount(source, options.mount_point, config)
    finally:
        source.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
