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
drillnorm.pipeline
==================
**End-to-end drill file normalization**

Takes the raw drill files of a board as exported by one or more EDA tools, and produces one plated and one non-plated
drill file in a single fixed Excellon dialect.
"""

from .detect import DrillDialect, classify, is_through_drill
from .excellon import parse_drill, generate_excellon
from .header import render_drill_header
from .merge import merge_and_split
from .objects import DrillResult
from .utils import HoleType


def process_drill_files(contents, filenames, header=render_drill_header):
    """ Parse, merge and re-emit a set of drill files.

    Blind and buried via files are skipped with a message in :py:attr:`.DrillResult.warnings`. Everything else is
    parsed with the parser matching its dialect, split by plating class, and merged by diameter. A plating class that
    is provided by exactly one KiCad file is written from that file as-is, since KiCad already separates PTH and NPTH.

    :param contents: Sequence of drill file contents as ``str``
    :param filenames: Sequence of the original file names, same length as ``contents``
    :param header: Callable ``(hole_type_label, layer_name) -> str`` for the comment header of the output files
    :rtype: :py:class:`.DrillResult`
    """
    contents, filenames = list(contents), list(filenames)
    if len(contents) != len(filenames):
        raise ValueError(f'Got {len(contents)} drill file contents but {len(filenames)} file names.')

    result = DrillResult()
    programs = []
    sources = { hole_type: [] for hole_type in HoleType }

    for content, filename in zip(contents, filenames):
        if not is_through_drill(filename):
            result.warnings.append(f'Skipped blind/buried via file: {filename}. Only through holes are supported.')
            continue

        dialect = classify(content)
        program, _hole_type = parse_drill(content, filename=filename, dialect=dialect)
        programs.append(program)
        for hole_type in program.hole_types():
            sources[hole_type].append((dialect, program))

    pth, npth = merge_and_split(programs)
    merged = { HoleType.PLATED: pth, HoleType.NON_PLATED: npth }

    for hole_type, contributors in sources.items():
        if len(contributors) == 1:
            dialect, program = contributors[0]
            if dialect == DrillDialect.KICAD:
                merged[hole_type] = program

    if merged[HoleType.PLATED] is not None:
        result.pth_content = generate_excellon(merged[HoleType.PLATED], HoleType.PLATED, header=header)

    if merged[HoleType.NON_PLATED] is not None:
        result.npth_content = generate_excellon(merged[HoleType.NON_PLATED], HoleType.NON_PLATED, header=header)

    return result
