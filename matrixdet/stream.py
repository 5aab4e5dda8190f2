#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Character sources and sinks around text streams

Reading from the source and writing to the sink are the only operations
that can fail fatally. Both wrap the underlying OSError in StreamIOError,
which is never caught by the parser.
"""

from typing import Iterator, TextIO

from .names import DEFAULT_CHUNK_SIZE

__all__ = ['StreamIOError', 'CharacterSink', 'iter_characters']


class StreamIOError(OSError):
    """Reading the input or writing the transcript failed"""


class CharacterSink:
    """Write-only wrapper of a text stream

    Tracks the last character written, so annotations can be placed on a
    line of their own.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self.last_char = None

    def write(self, text: str) -> None:
        if not text:
            return
        try:
            self._stream.write(text)
        except OSError as e:
            raise StreamIOError(f"Was not able to write to output: {e}") from e
        self.last_char = text[-1]

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise StreamIOError(f"Was not able to flush output: {e}") from e


def iter_characters(stream: TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """Lazily yield the characters of a text stream

    The stream is read in chunks of chunk_size characters until it is
    exhausted.

    Raises:
        StreamIOError: if reading from the stream fails.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk size must be positive, got {chunk_size}")
    while True:
        try:
            chunk = stream.read(chunk_size)
        except (OSError, UnicodeDecodeError) as e:
            raise StreamIOError(f"Was not able to read the input: {e}") from e
        if not chunk:
            return
        yield from chunk
