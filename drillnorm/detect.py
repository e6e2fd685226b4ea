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
drillnorm.detect
================
**Drill file dialect detection and file name filters**

Dialect detection only ever looks at file contents. File names are only used to decide whether a file is a drill file
at all, and whether it contains through holes.
"""

import re
from enum import Enum


class DrillDialect(Enum):
    """ Excellon dialect of a drill file. """
    KICAD = 'kicad'
    ALTIUM = 'altium'
    #: Parsed like :py:attr:`ALTIUM`, which is the more forgiving of the two.
    UNKNOWN = 'unknown'


# Altium-style tool declaration, e.g. "T01F00S00C0.30000"
ALTIUM_TOOL_RE = re.compile(r'^T\d+F\d+S\d+C[\d.]+', re.MULTILINE)

# Blind or buried via drill pairs as exported by Altium (.tx1 through .tx6)
BLIND_BURIED_EXTENSIONS = tuple(f'.tx{i}' for i in range(1, 7))


def classify(content):
    """ Identify the dialect of an Excellon file from its contents.

    :param str content: Contents of the drill file
    :rtype: :py:class:`.DrillDialect`
    """
    if 'kicad' in content.lower():
        return DrillDialect.KICAD

    if ALTIUM_TOOL_RE.search(content):
        return DrillDialect.ALTIUM

    if 'altium' in content.lower():
        return DrillDialect.ALTIUM

    return DrillDialect.UNKNOWN


def identify_software(content):
    """ Guess the generating EDA tool from keywords in ``content``. Returns ``'Altium'``, ``'KiCad'``, ``'EasyEDA'`` or
    ``None``. Checked in that order. """
    lower = content.lower()
    for keyword, name in (('altium', 'Altium'), ('kicad', 'KiCad'), ('easyeda', 'EasyEDA')):
        if keyword in lower:
            return name
    return None


def _name(filename):
    return str(filename).lower()


def is_drill_file(filename):
    """ Test whether ``filename`` names an Excellon drill file.

    Matches ``.drl``, Altium's ``.tx1`` ... ``.tx6`` layer pair files, and ``.txt`` files whose name mentions holes or
    drills (e.g. Altium's ``RoundHoles.TXT``).
    """
    name = _name(filename)
    if name.endswith('.drl') or name.endswith(BLIND_BURIED_EXTENSIONS):
        return True

    return name.endswith('.txt') and ('hole' in name or 'drill' in name)


def is_through_drill(filename):
    """ Test whether ``filename`` contains through holes, i.e. is not a blind/buried via layer pair file. """
    return not _name(filename).endswith(BLIND_BURIED_EXTENSIONS)
