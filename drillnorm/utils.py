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
drillnorm.utils
===============
**Shared enums, warning categories and parsing helpers**
"""

import re
from enum import Enum


MILLIMETERS_PER_INCH = 25.4


class DrillSyntaxWarning(SyntaxWarning):
    """ drillnorm found an Excellon statement it could not make sense of. Parsing continues regardless. """
    pass


class RegexMatcher:
    """ Internal parsing helper. Maps regexes to handler methods, first full match wins. """
    def __init__(self):
        self.mapping = {}

    def match(self, regex):
        def wrapper(fun):
            nonlocal self
            self.mapping[re.compile(regex)] = fun
            return fun
        return wrapper

    def handle(self, inst, line):
        for regex, handler in self.mapping.items():
            if (match := regex.fullmatch(line)):
                handler(inst, match)
                return True
        else:
            return False


class HoleType(Enum):
    """ Plating class of a drilled hole or milled slot. """
    #: PTH, plated through hole
    PLATED = 'PLATED'
    #: NPTH, non-plated through hole
    NON_PLATED = 'NON_PLATED'

    @property
    def label(self):
        """ Label used in ``;TYPE=...`` comments and drill headers. """
        return self.value

    @property
    def layer_name(self):
        """ Canonical layer name of the merged output file for this plating class. """
        return 'PTH_Through' if self is HoleType.PLATED else 'NPTH_Through'


class DrillUnit(Enum):
    """ Length unit declared in an Excellon header. """
    INCH = 'inch'
    METRIC = 'metric'

    def to_mm(self, value):
        """ Convert ``value`` given in this unit into millimeters.

        :param float value:
        :rtype: float
        """
        if self is DrillUnit.INCH:
            return value * MILLIMETERS_PER_INCH
        return value

    @classmethod
    def from_keyword(kls, keyword):
        """ Map an Excellon unit keyword (``INCH``, ``METRIC``, ``M71``, ``M72``) onto a unit. """
        keyword = keyword.upper()
        if keyword in ('INCH', 'M72'):
            return kls.INCH
        if keyword in ('METRIC', 'M71'):
            return kls.METRIC
        raise ValueError(f'Invalid unit keyword {keyword!r}. Should be either "INCH" or "METRIC".')
