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
"""Run the parser over a whole input"""

from contextlib import ExitStack
import logging
import os
from typing import List

from .names import *
from .parser import MatrixResult, MatrixStreamParser
from .stream import CharacterSink, iter_characters

__all__ = ['compute_determinants']

allowed_keys = {CHUNK_SIZE, ENCODING}


def compute_determinants(source, sink, **kwargs) -> List[MatrixResult]:
    """Compute the determinants of all matrices in a text input

    Every character of the input is copied to the sink, followed by a
    'Calculated value: ...' line for each well-formed matrix and an
    'Encountered error ...' line for each malformed one.

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> results = compute_determinants(io.StringIO("2\\n0 1\\n1 0\\n"), out)
        >>> results[0].determinant
        -1

    Args:
        source (str, os.PathLike or text stream):
            Input file path or readable text stream. Files are opened with
            newline='' so that line breaks reach the parser unchanged.

        sink (str, os.PathLike or text stream):
            Output file path or writable text stream.

        chunk_size (optional (int)):
            Number of characters read from the source at once (default: 4096).

        encoding (optional (str)):
            Encoding of input and output files given as paths (default: 'utf-8').

    Returns:
        (list of MatrixResult):
        One entry per matrix in the input, in input order.

    Raises:
        StreamIOError: if reading the input or writing the output fails.
    """
    for key in kwargs:
        if key not in allowed_keys:
            raise Exception("Key " + key + " is not supported.")
    chunk_size = int(kwargs.get(CHUNK_SIZE, DEFAULT_CHUNK_SIZE))
    encoding = kwargs.get(ENCODING, DEFAULT_ENCODING)

    with ExitStack() as stack:
        if isinstance(source, (str, os.PathLike)):
            source = stack.enter_context(open(source, 'r', encoding=encoding, newline=''))
        if isinstance(sink, (str, os.PathLike)):
            sink = stack.enter_context(open(sink, 'w', encoding=encoding, newline=''))
        sink = CharacterSink(sink)
        parser = MatrixStreamParser(sink)
        for char in iter_characters(source, chunk_size):
            parser.feed(char)
        parser.finish()
        sink.flush()

    num_failed = sum(1 for result in parser.results if not result.ok)
    logging.info("Processed %d matrices, %d with errors.", len(parser.results), num_failed)
    return parser.results
