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
"""Static strings used in the matrixdet package

    Parser modes

        PARSING_ORDER = 'parsing_order'

        PARSING_MATRIX = 'parsing_matrix'

        RECOVERING = 'recovering'

    Options

        CHUNK_SIZE = 'chunk_size'

        ENCODING = 'encoding'

    Transcript annotations

        RESULT_TEMPLATE = 'Calculated value: {value}'

        ROW_ERROR_TEMPLATE = "Encountered error on line {row} due to --> '{message}'"

        ORDER_ERROR_TEMPLATE = "Encountered error during matrix order parsing --> '{message}'"
"""

# Parser modes
PARSING_ORDER = 'parsing_order'
PARSING_MATRIX = 'parsing_matrix'
RECOVERING = 'recovering'

# Options
CHUNK_SIZE = 'chunk_size'
ENCODING = 'encoding'

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_ENCODING = 'utf-8'

# Characters
CR = '\r'
LF = '\n'
SPACE = ' '
DASH = '-'
LINE_BREAKS = (CR, LF)

# Transcript annotations
RESULT_TEMPLATE = 'Calculated value: {value}'
ROW_ERROR_TEMPLATE = "Encountered error on line {row} due to --> '{message}'"
ORDER_ERROR_TEMPLATE = "Encountered error during matrix order parsing --> '{message}'"

# Error messages
MSG_NEGATIVE_ORDER = 'positive integers only'
MSG_ZERO_ORDER = 'matrix order must be positive'
MSG_INVALID_ORDER_CHAR = "invalid character '{char}'"
MSG_INVALID_CHAR = "invalid character '{char}'"
MSG_LINE_EXCEEDS = 'line exceeds max allowable length'
MSG_CONSECUTIVE_DASHES = "consecutive dashes '-' present"
MSG_CONSECUTIVE_SPACES = 'more than one space consecutively (consecutive spaces)'
MSG_DANGLING_SIGN = "integer did not follow '-' sign"
MSG_ROW_TOO_SHORT = 'line too short'
MSG_ROW_TOO_LONG = 'line too long'
MSG_TRUNCATED = 'input ended before the matrix was complete'
