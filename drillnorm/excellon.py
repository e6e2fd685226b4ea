#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2026 The drillnorm authors
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

"""
drillnorm.excellon
==================
**Excellon dialect parsers and the canonical drill file writer**

Both parsers work in two passes. The first pass reads the header up to the ``%`` (or ``M95``) terminator and collects
the number format and tool table. The second pass runs the body through a :py:class:`.RouteTracker`, which turns
plain coordinates into holes and ``M15``/``G01``/``M16`` sequences into slots.
"""

import re
import warnings
from enum import Enum
from dataclasses import dataclass

from .cam import FileSettings
from .detect import DrillDialect, classify
from .header import render_drill_header
from .objects import ToolDefinition, Hole, Slot, DrillOperation, DrillProgram
from .utils import DrillUnit, HoleType, RegexMatcher, DrillSyntaxWarning


class ProgramState(Enum):
    """ Internal helper class used to track whether the end of program statement has been reached. """
    BODY = 0
    FINISHED = 1


def _is_header_end(line):
    return line in ('%', 'M95')


def _iter_lines(data):
    """ Yield ``(lineno, line)`` for all non-empty lines of ``data``. Coordinates of a bare ``G00`` or ``G01`` may be on
    the next line, such pairs are joined. """
    leftover = None
    for lineno, line in enumerate(data.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue

        if leftover is not None:
            if line[0] in 'XY':
                yield lineno, leftover[1] + line
                leftover = None
                continue
            yield leftover
            leftover = None

        if line in ('G00', 'G01'):
            leftover = lineno, line
            continue

        yield lineno, line

    if leftover is not None:
        yield leftover


@dataclass
class RouteState:
    """ Sequential state of the body pass. """
    #: Currently selected tool, ``None`` before the first tool change
    tool : ToolDefinition = None
    #: Cursor position in mm
    x : float = 0.0
    y : float = 0.0
    #: ``True`` between ``M15`` (tool down) and ``M16`` (tool up)
    routing : bool = False
    program_state : ProgramState = ProgramState.BODY

    def move(self, x, y):
        """ Move cursor, keeping axes that are ``None``. Returns the previous position. """
        old = self.x, self.y
        if x is not None:
            self.x = x
        if y is not None:
            self.y = y
        return old


class RouteTracker:
    """ Body pass state machine shared by both dialect parsers.

    :param dict tools: ``{ index: ToolDefinition }`` as collected from the file header
    :param decode: Callable converting a coordinate token into mm
    :param warn: Callable used to report recoverable anomalies
    """

    def __init__(self, tools, decode, warn):
        self.tools = tools
        self.decode = decode
        self.warn = warn
        self.state = RouteState()
        self.commands = { index: [] for index in tools }

    def feed(self, line):
        """ Process one body line. """
        if self.state.program_state == ProgramState.FINISHED:
            self.warn('Commands found following end of program statement. Ignoring.')
            return

        if line.startswith(';'):
            return

        if not self.exprs.handle(self, line):
            self.warn('Unknown excellon statement. Ignoring.')

    def operations(self):
        """ One :py:class:`.DrillOperation` per tool that was actually used, in ascending tool index order. """
        return [ DrillOperation(self.tools[index], cmds)
                 for index, cmds in sorted(self.commands.items()) if cmds ]

    def _coords(self, match):
        x, y = match['x'], match['y']
        x = self.decode(x) if x else None
        y = self.decode(y) if y else None
        return x, y

    def _emit(self, cmd):
        if self.state.tool is None:
            self.warn('Coordinate found before first tool selection. Ignoring.')
            return
        self.commands[self.state.tool.index].append(cmd)

    exprs = RegexMatcher()

    xy_coord = r'(?:X(?P<x>[-+]?[0-9]*\.?[0-9]*))?(?:Y(?P<y>[-+]?[0-9]*\.?[0-9]*))?'

    @exprs.match(r'T([0-9]+)(?:[A-Z][.0-9]+)*')
    def handle_tool_selection(self, match):
        index = int(match[1])

        if index == 0: # T0 is used as END marker, just ignore
            return

        if index not in self.tools:
            self.warn(f'Undefined tool index {index} selected. Ignoring.')
            return

        self.state.tool = self.tools[index]

    @exprs.match('G00' + xy_coord)
    def handle_rapid_move(self, match):
        self.state.move(*self._coords(match))

    @exprs.match('M15')
    def handle_drill_down(self, match):
        self.state.routing = True

    @exprs.match('M16|M17')
    def handle_drill_up(self, match):
        self.state.routing = False

    @exprs.match('G01' + xy_coord)
    def handle_linear_move(self, match):
        self._route(*self._coords(match))

    def _route(self, x, y):
        start = self.state.move(x, y)

        if not self.state.routing or (x is None and y is None):
            return

        self._emit(Slot(*start, self.state.x, self.state.y))

    @exprs.match('G05')
    def handle_drill_mode(self, match):
        self.state.routing = False

    @exprs.match(r'G90|M71|M72|G40|F[0-9]+|S[0-9]+')
    def handle_ignored(self, match):
        pass

    @exprs.match('M30')
    def handle_end_of_program(self, match):
        self.state.program_state = ProgramState.FINISHED

    @exprs.match(xy_coord + 'G85' + xy_coord.replace('<x>', '<x2>').replace('<y>', '<y2>'))
    def handle_canned_slot(self, match):
        start_x, start_y = self._coords(match)
        self.state.move(start_x, start_y)
        start = self.state.move(self.decode(match['x2']) if match['x2'] else None,
                                self.decode(match['y2']) if match['y2'] else None)
        self._emit(Slot(*start, self.state.x, self.state.y))

    @exprs.match(xy_coord)
    def handle_bare_coordinate(self, match):
        x, y = self._coords(match)
        if x is None and y is None:
            self.warn('Empty coordinate. Ignoring.')
            return

        if self.state.routing:
            # Bare coordinates while the tool is down continue the route, like an implicit G01.
            self._route(x, y)
            return

        self.state.move(x, y)
        self._emit(Hole(self.state.x, self.state.y))


class AltiumParser:
    """ Parser for Altium Designer style Excellon files, which is also used as the fallback for unknown generators.

    Altium writes one file per plating class or one composite file with ``;TYPE=PLATED`` / ``;TYPE=NON_PLATED``
    comments ahead of the tool declarations, uses fixed-width coordinates without decimal point and declares their
    format in a ``;FILE_FORMAT=2:5`` comment.
    """

    exprs = RegexMatcher()

    def __init__(self):
        self.settings = FileSettings()
        self.tools = {}
        self.hole_type = HoleType.PLATED
        self.filename = None
        self.lineno, self.line = None, None

    def warn(self, msg):
        warnings.warn(f'{self.filename}:{self.lineno} "{self.line}": {msg}', DrillSyntaxWarning)

    def parse(self, data, filename=None):
        """ Parse ``data``.

        :param str data: Contents of the drill file
        :param str filename: Used only in warnings
        :returns: ``(program, None)``. Plating is tracked per tool since Altium composite files mix both classes.
        """
        self.filename = filename or '<unknown>'

        lines = list(_iter_lines(data))
        for self.lineno, self.line in lines:
            if _is_header_end(self.line):
                break
            self.exprs.handle(self, self.line)

        tracker = RouteTracker(self.tools, self.settings.parse_excellon_value, self.warn)
        in_header = True
        for self.lineno, self.line in lines:
            if in_header:
                in_header = not _is_header_end(self.line)
                continue
            tracker.feed(self.line)

        return DrillProgram(tracker.operations()), None

    @exprs.match(r'(?i)(INCH|METRIC)(.*)')
    def parse_unit(self, match):
        self.settings.unit = DrillUnit.from_keyword(match[1])

        suffix = match[2].upper()
        if 'LZ' in suffix:
            self.settings.zeros = 'leading'
        elif 'TZ' in suffix:
            self.settings.zeros = 'trailing'

    @exprs.match(r'.*FILE_FORMAT=([0-9]+):([0-9]+).*')
    def parse_file_format(self, match):
        self.settings.number_format = int(match[1]), int(match[2])

    @exprs.match(r'.*TYPE=(NON_PLATED|PLATED).*')
    def parse_plating_comment(self, match):
        # Applies to all following tool declarations
        self.hole_type = HoleType.PLATED if match[1] == 'PLATED' else HoleType.NON_PLATED

    @exprs.match(r'T([0-9]+)((?:[A-Z][.0-9]+)+).*') # Tool definition: T** with at least one parameter
    def parse_tool_definition(self, match):
        # Feed rate and spindle speed are meant for the drilling machine, we only need the diameter.
        params = { m[0]: m[1:] for m in re.findall('[BCFHSTZ][.0-9]+', match[2]) }
        if 'C' not in params:
            self.warn('Tool definition without diameter. Ignoring.')
            return

        if (index := int(match[1])) in self.tools:
            self.warn(f'Re-definition of tool index {index}, overwriting old definition.')

        try:
            diameter = float(params['C'])
        except ValueError:
            diameter = 0.0

        self.tools[index] = ToolDefinition(index, self.settings.unit.to_mm(diameter), self.hole_type)


class KicadParser:
    """ Parser for KiCad Excellon files.

    KiCad writes plated and non-plated holes into separate files, so the plating class is decided once for the whole
    file. Coordinates are always written with an explicit decimal point.
    """

    exprs = RegexMatcher()
    NONPLATED_RE = re.compile('nonplated|npth', re.IGNORECASE)

    def __init__(self):
        self.unit = DrillUnit.METRIC
        self.tools = {}
        self.hole_type = HoleType.PLATED
        self.filename = None
        self.lineno, self.line = None, None

    def warn(self, msg):
        warnings.warn(f'{self.filename}:{self.lineno} "{self.line}": {msg}', DrillSyntaxWarning)

    def decode(self, value):
        try:
            return self.unit.to_mm(float(value))
        except ValueError:
            return 0.0

    def parse(self, data, filename=None):
        """ Parse ``data``.

        :param str data: Contents of the drill file
        :param str filename: Used only in warnings
        :returns: ``(program, hole_type)``
        """
        self.filename = filename or '<unknown>'

        if self.NONPLATED_RE.search(data):
            self.hole_type = HoleType.NON_PLATED
        else:
            self.hole_type = HoleType.PLATED

        lines = list(_iter_lines(data))
        for self.lineno, self.line in lines:
            if _is_header_end(self.line):
                break
            self.exprs.handle(self, self.line)

        tracker = RouteTracker(self.tools, self.decode, self.warn)
        in_header = True
        for self.lineno, self.line in lines:
            if in_header:
                in_header = not _is_header_end(self.line)
                continue
            tracker.feed(self.line)

        return DrillProgram(tracker.operations()), self.hole_type

    @exprs.match(r'(?i)(INCH|METRIC)(?:,.*)?')
    def parse_unit(self, match):
        self.unit = DrillUnit.from_keyword(match[1])

    @exprs.match(r'T([0-9]+)C([.0-9]+).*')
    def parse_tool_definition(self, match):
        try:
            diameter = float(match[2])
        except ValueError:
            diameter = 0.0

        index = int(match[1])
        self.tools[index] = ToolDefinition(index, self.unit.to_mm(diameter), self.hole_type)


PARSERS = {
    DrillDialect.KICAD: KicadParser,
    DrillDialect.ALTIUM: AltiumParser,
    DrillDialect.UNKNOWN: AltiumParser,
}


def parse_drill(data, filename=None, dialect=None):
    """ Parse an Excellon drill file with the parser matching its dialect.

    :param str data: Contents of the drill file
    :param str filename: Used only in warnings
    :param DrillDialect dialect: Override automatic dialect detection
    :returns: ``(program, hole_type)`` where ``hole_type`` is ``None`` unless the dialect fixes it for the whole file
    """
    if dialect is None:
        dialect = classify(data)
    return PARSERS[dialect]().parse(data, filename=filename)


def _generate_statements(program, hole_type, header):
    settings = FileSettings()
    fmt = settings.write_excellon_value
    operations = list(program)

    text = header(hole_type.label, hole_type.layer_name)
    if text:
        yield text[:-1] if text.endswith('\n') else text

    yield 'M48'
    yield 'METRIC,LZ,0000.00000'

    for index, op in enumerate(operations, start=1):
        yield f';Hole size {index} = {fmt(op.diameter)} METRIC'
        yield f'T{index:02d}C{fmt(op.diameter)}'

    yield '%'
    yield 'G05'
    yield 'G90'

    for index, op in enumerate(operations, start=1):
        yield f'T{index:02d}'
        for cmd in op.commands:
            if isinstance(cmd, Slot):
                yield f'X{fmt(cmd.start_x)}Y{fmt(cmd.start_y)}G85X{fmt(cmd.end_x)}Y{fmt(cmd.end_y)}'
            else:
                yield f'X{fmt(cmd.x)}Y{fmt(cmd.y)}'

    yield 'M30'


def generate_excellon(program, hole_type, header=render_drill_header):
    """ Write ``program`` as a canonical metric Excellon file.

    Tools are renumbered from ``T01`` in program order. All values use fixed 5-decimal notation.

    The header text is written first. A single trailing newline on it is dropped, and a header that does not end with a
    newline gets one, so ``M48`` always starts on its own line.

    :param DrillProgram program: Program to write
    :param HoleType hole_type: Plating class, passed on to ``header``
    :param header: Callable ``(hole_type_label, layer_name) -> str`` returning the text written before ``M48``
    :rtype: str
    """
    return '\n'.join(_generate_statements(program, hole_type, header)) + '\n'
