# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified By: Cuong CT, 6/12/2025
# Change Description:
# - Dropped the no-op fallback, a missing filename is an error now.
# - Added `atomic_write` for state files that must never be left half written.

import contextlib
import os
import pathlib
import sys
from typing import IO, Any, Generator, Union


@contextlib.contextmanager
def smart_open(
    filename: Union[str, pathlib.Path],
    mode: str = "w",
    binary: bool = False,
    create_parent_dirs: bool = True,
) -> Generator[IO[Any], None, None]:
    """Opens a file, or the process stdin/stdout when filename is "-"."""
    if not filename:
        raise ValueError("filename must not be empty, use '-' for stdin/stdout")

    full_mode = mode + ("b" if binary else "")

    if filename == "-":
        # Yield the system stream directly, closing it would close the underlying FD
        if "w" in mode:
            yield sys.stdout.buffer if binary else sys.stdout
        else:
            yield sys.stdin.buffer if binary else sys.stdin
        return

    path = pathlib.Path(filename)
    if create_parent_dirs and "w" in mode:
        path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, full_mode) as fh:
        yield fh


@contextlib.contextmanager
def atomic_write(filename: Union[str, pathlib.Path], binary: bool = False) -> Generator[IO[Any], None, None]:
    """
    Writes into a sibling temp file and moves it over `filename` only when the block succeeds.
    """
    path = pathlib.Path(filename)
    tmp_path = path.with_name(f".{path.name}.tmp")

    try:
        with smart_open(tmp_path, mode="w", binary=binary) as fh:
            yield fh
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
