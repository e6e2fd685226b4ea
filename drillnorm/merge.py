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
drillnorm.merge
===============
**Merging drill programs from several files into one program per plating class**
"""

from .objects import DrillOperation, DrillProgram
from .utils import HoleType


def merge_operations_by_diameter(operations):
    """ Merge operations whose tools have the same diameter.

    Diameters are compared using :py:attr:`.ToolDefinition.merge_key`. Commands are concatenated in input order, and the
    tool definition of the first operation seen for each diameter is kept. The result is sorted by diameter.

    :param operations: iterable of :py:class:`.DrillOperation`
    :rtype: list
    """
    groups = {}
    for op in operations:
        key = op.tool.merge_key
        if key in groups:
            tool, commands = groups[key]
            commands.extend(op.commands)
        else:
            groups[key] = op.tool, list(op.commands)

    return [ DrillOperation(tool, commands) for _key, (tool, commands) in sorted(groups.items()) ]


def split_by_hole_type(programs):
    """ Partition all operations of ``programs`` by plating class, keeping input order.

    :returns: ``{ HoleType: [DrillOperation, ...] }`` with an entry for every :py:class:`.HoleType`
    :rtype: dict
    """
    buckets = { hole_type: [] for hole_type in HoleType }
    for program in programs:
        for op in program:
            buckets[op.hole_type].append(op)
    return buckets


def merge_and_split(programs):
    """ Merge ``programs`` into one plated and one non-plated program.

    :param programs: iterable of :py:class:`.DrillProgram`
    :returns: ``(pth_program, npth_program)``. Either is ``None`` if there were no holes of its class.
    :rtype: tuple
    """
    buckets = split_by_hole_type(programs)

    def merged(hole_type):
        operations = merge_operations_by_diameter(buckets[hole_type])
        return DrillProgram(operations) if operations else None

    return merged(HoleType.PLATED), merged(HoleType.NON_PLATED)
