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
drillnorm
=========

drillnorm merges the Excellon drill files exported by KiCad, Altium Designer and similar EDA tools into exactly two
canonical drill files, one for plated and one for non-plated through holes, the way most PCB manufacturers want them.
"""

from .detect import DrillDialect, classify, is_drill_file, is_through_drill
from .excellon import parse_drill, generate_excellon
from .merge import merge_and_split
from .objects import ToolDefinition, Hole, Slot, DrillOperation, DrillProgram, DrillResult
from .pipeline import process_drill_files
from .utils import HoleType, DrillUnit

__version__ = '0.3.0'
