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
drillnorm.objects
=================
**Immutable data model for parsed and merged drill programs**

All lengths stored in these objects are in millimeters.
"""

from dataclasses import dataclass, field
from collections import Counter

from .utils import HoleType


#: Diameters are considered identical if they agree after scaling by this factor and rounding.
DIAMETER_KEY_SCALE = 100000


@dataclass(frozen=True)
class ToolDefinition:
    """ A drill tool as declared in a source file's header. """
    #: Tool number as used in the source file. Output files renumber tools, so this is informational only.
    index : int
    #: Tool diameter in mm
    diameter : float
    #: Plating class of everything drilled with this tool
    hole_type : HoleType = HoleType.PLATED

    @property
    def merge_key(self):
        """ Integer key used to decide whether two tools have the same diameter. """
        return round(self.diameter * DIAMETER_KEY_SCALE)


@dataclass(frozen=True)
class Hole:
    """ A single drilled hole. """
    x : float
    y : float


@dataclass(frozen=True)
class Slot:
    """ A milled slot routed in a straight line from start to end. """
    start_x : float
    start_y : float
    end_x : float
    end_y : float


@dataclass(frozen=True)
class DrillOperation:
    """ All holes and slots made with one tool, in program order. An operation always has at least one command. """
    tool : ToolDefinition
    commands : tuple

    def __post_init__(self):
        if not isinstance(self.commands, tuple):
            object.__setattr__(self, 'commands', tuple(self.commands))
        if not self.commands:
            raise ValueError(f'Operation for tool T{self.tool.index} has no holes or slots')

    def __len__(self):
        return len(self.commands)

    @property
    def diameter(self):
        return self.tool.diameter

    @property
    def hole_type(self):
        return self.tool.hole_type

    def holes(self):
        return (cmd for cmd in self.commands if isinstance(cmd, Hole))

    def slots(self):
        return (cmd for cmd in self.commands if isinstance(cmd, Slot))


@dataclass(frozen=True)
class DrillProgram:
    """ An ordered sequence of :py:class:`.DrillOperation`, at most one per tool. """
    operations : tuple = ()

    def __post_init__(self):
        if not isinstance(self.operations, tuple):
            object.__setattr__(self, 'operations', tuple(self.operations))

    def __len__(self):
        return len(self.operations)

    def __iter__(self):
        return iter(self.operations)

    def __str__(self):
        holes = sum(len(list(op.holes())) for op in self.operations)
        slots = sum(len(list(op.slots())) for op in self.operations)
        return f'<DrillProgram with {holes} holes, {slots} slots using {len(self.operations)} tools>'

    def tool_counts(self):
        """ Number of commands per tool diameter.

        :rtype: collections.Counter
        """
        counts = Counter()
        for op in self.operations:
            counts[op.diameter] += len(op)
        return counts

    def hole_types(self):
        """ Set of plating classes present in this program. """
        return {op.hole_type for op in self.operations}


@dataclass
class DrillResult:
    """ Output of :py:func:`.process_drill_files`. Either output may be ``None`` if no holes of its class were found. """
    pth_content : str | None = None
    npth_content : str | None = None
    warnings : list = field(default_factory=list)

    @property
    def has_pth(self):
        return self.pth_content is not None

    @property
    def has_npth(self):
        return self.npth_content is not None
