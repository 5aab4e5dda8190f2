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
"""Streaming parser for matrices given as text

The parser consumes one character at a time. Every character is echoed to
the sink before it is interpreted, so the sink receives a transcript of the
input, interleaved with one annotation per matrix: either the calculated
determinant or the error that made the matrix unreadable.

Input format, per matrix:

    <order>
    <order integers separated by single spaces>     (order lines)

Lines end with LF or CR LF. After an error, the remaining lines of the
broken matrix are echoed without being interpreted, the error is annotated
and parsing restarts with the order of the next matrix.
"""

from dataclasses import dataclass
from enum import Enum
import logging
import time
from typing import List, Optional

from .grid import MatrixGrid
from .names import *
from .stream import CharacterSink

__all__ = ['ParseErrorKind', 'ParseError', 'MatrixResult', 'ParserState', 'MatrixStreamParser']

LOG = logging.getLogger(__name__)

DIGITS = '0123456789'


class ParseErrorKind(Enum):
    """Kinds of malformed input. All of them only affect the current matrix."""
    INVALID_DIMENSION_CHARACTER = 'InvalidDimensionCharacter'
    NEGATIVE_DIMENSION = 'NegativeDimension'
    ZERO_DIMENSION = 'ZeroDimension'
    ROW_TOO_SHORT = 'RowTooShort'
    ROW_TOO_LONG = 'RowTooLong'
    CONSECUTIVE_SPACES = 'ConsecutiveSpaces'
    CONSECUTIVE_DASHES = 'ConsecutiveDashes'
    DANGLING_SIGN = 'DanglingSign'
    INVALID_CHARACTER = 'InvalidCharacter'
    TRUNCATED_INPUT = 'TruncatedInput'


@dataclass(frozen=True)
class ParseError:
    """A parse error and where it occurred

    row and column are 1-indexed. row is the line within the matrix body and
    is None for errors in the order line; column counts values in the body
    and characters in the order line.
    """
    kind: ParseErrorKind
    message: str
    row: Optional[int]
    column: int

    @property
    def in_order_line(self) -> bool:
        return self.row is None

    @property
    def annotation(self) -> str:
        if self.in_order_line:
            return ORDER_ERROR_TEMPLATE.format(message=self.message)
        return ROW_ERROR_TEMPLATE.format(row=self.row, message=self.message)


@dataclass(frozen=True)
class MatrixResult:
    """Outcome for one matrix of the input"""
    order: int
    determinant: Optional[int] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ParserState:
    """Everything the parser remembers between two characters

    A fresh instance is the state at the start of a matrix.

    row and col are the 0-indexed position of the value being read; col is
    also the number of values already committed in the current line.
    """
    mode: str = PARSING_ORDER
    order: int = 0
    order_digits: bool = False
    order_column: int = 0
    row: int = 0
    col: int = 0
    accumulator: int = 0
    negative: bool = False
    pending_value: bool = False
    prev_was_boundary: bool = True
    after_cr: bool = False
    lines_to_drain: int = 0
    error: Optional[ParseError] = None


class MatrixStreamParser:
    """Character-driven parser that validates matrices and reports determinants

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> parser = MatrixStreamParser(out)
        >>> parser.feed_text("2\\n1 2\\n3 4\\n")
        >>> parser.finish()
        >>> print(out.getvalue())
        2
        1 2
        3 4
        Calculated value: -2
        <BLANKLINE>
        <BLANKLINE>

    Args:
        sink (text stream or CharacterSink):
            Receives the transcript. OSErrors raised by the stream are
            re-raised as StreamIOError.
    """

    def __init__(self, sink):
        self._sink = sink if isinstance(sink, CharacterSink) else CharacterSink(sink)
        self.state = ParserState()
        self.grid: Optional[MatrixGrid] = None
        self.results: List[MatrixResult] = []

    def feed(self, char: str) -> None:
        """Echo and interpret a single character"""
        if len(char) != 1:
            raise ValueError(f"feed() takes a single character, got {char!r}")
        self._sink.write(char)
        state = self.state
        if state.after_cr:
            # the character after a CR belongs to the line break
            state.after_cr = False
            self._end_of_line()
        elif state.mode == RECOVERING:
            self._line_break(char)
        elif state.mode == PARSING_ORDER:
            self._handle_order_char(char)
        else:
            self._handle_matrix_char(char)

    def feed_text(self, text: str) -> None:
        for char in text:
            self.feed(char)

    def finish(self) -> None:
        """Close off the input

        A last line without a line break is taken as complete. A matrix that
        is still unfinished is reported as truncated.
        """
        state = self.state
        if state.after_cr:
            state.after_cr = False
            self._end_of_line()
        state = self.state
        if state.mode == PARSING_MATRIX and (state.col > 0 or state.pending_value or state.negative):
            self._end_of_line()
        state = self.state
        if state.mode == RECOVERING:
            self._report_error(state.error)
        elif state.mode == PARSING_MATRIX:
            self._enter_recovery(ParseError(ParseErrorKind.TRUNCATED_INPUT, MSG_TRUNCATED, state.row + 1,
                                            state.col + 1), 0)
        elif state.order_digits:
            self._enter_recovery(ParseError(ParseErrorKind.TRUNCATED_INPUT, MSG_TRUNCATED, None,
                                            state.order_column + 1), 0)

    # line breaks

    def _line_break(self, char: str) -> bool:
        if char == CR:
            self.state.after_cr = True
            return True
        if char == LF:
            self._end_of_line()
            return True
        return False

    def _end_of_line(self) -> None:
        mode = self.state.mode
        if mode == RECOVERING:
            self._drain_line()
        elif mode == PARSING_ORDER:
            self._finish_order_line()
        else:
            self._finish_row()

    # order line

    def _handle_order_char(self, char: str) -> None:
        if self._line_break(char):
            return
        state = self.state
        state.order_column += 1
        if char in DIGITS:
            state.order = state.order * 10 + int(char)
            state.order_digits = True
        elif char == DASH:
            self._fail_order(ParseErrorKind.NEGATIVE_DIMENSION, MSG_NEGATIVE_ORDER)
        else:
            self._fail_order(ParseErrorKind.INVALID_DIMENSION_CHARACTER, MSG_INVALID_ORDER_CHAR.format(char=char))

    def _finish_order_line(self) -> None:
        state = self.state
        if not state.order_digits:
            # blank line between matrices
            return
        if state.order == 0:
            self._enter_recovery(ParseError(ParseErrorKind.ZERO_DIMENSION, MSG_ZERO_ORDER, None, state.order_column), 0)
            return
        LOG.debug("Reading matrix of order %d", state.order)
        self.grid = MatrixGrid(state.order)
        state.mode = PARSING_MATRIX
        state.accumulator = 0

    def _fail_order(self, kind: ParseErrorKind, message: str) -> None:
        self._enter_recovery(ParseError(kind, message, None, self.state.order_column), 1)

    # matrix body

    def _handle_matrix_char(self, char: str) -> None:
        state = self.state
        if char in DIGITS:
            if state.col >= state.order:
                self._fail_in_row(ParseErrorKind.ROW_TOO_LONG, MSG_LINE_EXCEEDS)
            else:
                state.accumulator = state.accumulator * 10 + int(char)
                state.pending_value = True
                state.prev_was_boundary = False
        elif char == DASH:
            if state.negative:
                self._fail_in_row(ParseErrorKind.CONSECUTIVE_DASHES, MSG_CONSECUTIVE_DASHES)
            else:
                state.negative = True
                state.prev_was_boundary = False
        elif char == SPACE:
            if state.prev_was_boundary:
                self._fail_in_row(ParseErrorKind.CONSECUTIVE_SPACES, MSG_CONSECUTIVE_SPACES)
            elif not state.pending_value:
                self._fail_in_row(ParseErrorKind.DANGLING_SIGN, MSG_DANGLING_SIGN)
            else:
                self._commit_value()
        elif not self._line_break(char):
            self._fail_in_row(ParseErrorKind.INVALID_CHARACTER, MSG_INVALID_CHAR.format(char=char))

    def _commit_value(self) -> None:
        state = self.state
        value = -state.accumulator if state.negative else state.accumulator
        self.grid.append(value, state.row, state.col)
        state.col += 1
        state.accumulator = 0
        state.negative = False
        state.pending_value = False
        state.prev_was_boundary = True

    def _finish_row(self) -> None:
        state = self.state
        dangling_sign = state.negative and not state.pending_value
        if state.pending_value:
            self._commit_value()
        # after a trailing space no value is pending and col already counts the line
        state.row += 1
        committed = state.col
        state.col = 0
        if dangling_sign:
            self._fail_after_row(ParseErrorKind.DANGLING_SIGN, MSG_DANGLING_SIGN, committed)
        elif committed < state.order:
            self._fail_after_row(ParseErrorKind.ROW_TOO_SHORT, MSG_ROW_TOO_SHORT, committed)
        elif committed > state.order:
            self._fail_after_row(ParseErrorKind.ROW_TOO_LONG, MSG_ROW_TOO_LONG, committed)
        elif state.row == state.order:
            self._report_determinant()

    def _report_determinant(self) -> None:
        order = self.state.order
        start_time = time.perf_counter()
        determinant = self.grid.compute_determinant()
        LOG.debug("Time elapsed: %.6f s", time.perf_counter() - start_time)
        LOG.info("Determinant of %dx%d matrix: %d", order, order, determinant)
        self._annotate(RESULT_TEMPLATE.format(value=determinant))
        self.results.append(MatrixResult(order, determinant=determinant))
        self._reset()

    # errors and recovery

    def _fail_in_row(self, kind: ParseErrorKind, message: str) -> None:
        state = self.state
        error = ParseError(kind, message, state.row + 1, state.col + 1)
        self._enter_recovery(error, state.order - state.row)

    def _fail_after_row(self, kind: ParseErrorKind, message: str, committed: int) -> None:
        state = self.state
        error = ParseError(kind, message, state.row, committed + 1)
        self._enter_recovery(error, state.order - state.row)

    def _enter_recovery(self, error: ParseError, lines_to_drain: int) -> None:
        """Skip the rest of the broken matrix, then report the error"""
        LOG.warning("%s at %s, column %d: %s", error.kind.value,
                    "order line" if error.in_order_line else f"row {error.row}", error.column, error.message)
        if lines_to_drain <= 0:
            self._report_error(error)
            return
        state = self.state
        state.mode = RECOVERING
        state.error = error
        state.lines_to_drain = lines_to_drain

    def _drain_line(self) -> None:
        state = self.state
        state.lines_to_drain -= 1
        if state.lines_to_drain <= 0:
            self._report_error(state.error)

    def _report_error(self, error: ParseError) -> None:
        self._annotate(error.annotation)
        self.results.append(MatrixResult(self.state.order, error=error))
        self._reset()

    def _annotate(self, text: str) -> None:
        if self._sink.last_char is not None and self._sink.last_char not in LINE_BREAKS:
            self._sink.write(LF)
        self._sink.write(text + LF + LF)

    def _reset(self) -> None:
        self.state = ParserState()
        self.grid = None
