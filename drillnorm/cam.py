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

import re
from dataclasses import dataclass

from .utils import DrillUnit


@dataclass
class FileSettings:
    ''' Number format settings of an Excellon drill file.

    .. note::
        This class uses the Excellon convention for zero suppression, which is the opposite of the Gerber one.
        ``zeros='leading'`` means the file is in LZ mode, i.e. leading zeros are *kept* and the integer part of every
        coordinate has a fixed width of ``number_format[0]`` digits. ``zeros='trailing'`` means TZ mode, where trailing
        zeros are kept and the fractional part has a fixed width of ``number_format[1]`` digits.
    '''
    #: Declared unit. :py:attr:`.DrillUnit.METRIC` or :py:attr:`.DrillUnit.INCH`
    unit : DrillUnit = DrillUnit.METRIC
    #: Zero mode. See note at :py:class:`.FileSettings` for meaning.
    zeros : str = 'leading'
    #: Number format. ``(integer, decimal)`` tuple of number of integer and decimal digits.
    number_format : tuple = (2, 4)

    # input validation
    def __setattr__(self, name, value):
        if name == 'unit' and not isinstance(value, DrillUnit):
            raise ValueError(f'Unit must be a DrillUnit, not {value!r}')
        elif name == 'zeros' and value not in ('leading', 'trailing'):
            raise ValueError(f'zeros must be either "leading" or "trailing", not {value!r}')
        elif name == 'number_format':
            if len(value) != 2 or any(not isinstance(e, int) or e < 0 for e in value):
                raise ValueError(f'Number format must be a (integer, fractional) tuple of integers, not {value!r}')

        super().__setattr__(name, value)

    def __str__(self):
        return f'<File settings: unit={self.unit.value} zeros={self.zeros} number_format={self.number_format}>'

    def parse_excellon_value(self, value):
        """ Decode a numeric coordinate token into millimeters using this file's settings.

        Tokens containing a decimal point are taken literally. Anything that does not parse decodes to ``0.0``.

        :param str value: token as found after an ``X`` or ``Y`` address, optionally signed.
        :rtype: float
        """
        if not value:
            return 0.0

        if '.' in value:
            if not re.fullmatch(r'[-+]?[0-9]*\.[0-9]*', value):
                return 0.0
            try:
                return self.unit.to_mm(float(value))
            except ValueError: # lone dot
                return 0.0

        sign = -1.0 if value.startswith('-') else 1.0
        digits = value.lstrip('+-')
        if not (digits.isascii() and digits.isdigit()):
            return 0.0

        integer_digits, decimal_digits = self.number_format

        if self.zeros == 'leading':
            integer, fraction = digits[:integer_digits], digits[integer_digits:]
            if not fraction:
                num = float(digits)
            else:
                num = int(integer or '0') + int(fraction) / 10**len(fraction)

        else: # trailing zeros kept, fixed-width fraction
            num = int(digits) / 10**decimal_digits

        return self.unit.to_mm(sign * num)

    def write_excellon_value(self, value):
        """ Format a millimeter value in the fixed 5-decimal notation used for output files. No zero suppression. """
        num = f'{value:.5f}'
        if num.startswith('-') and not num.strip('-0.'):
            num = num[1:] # no negative zero
        return num
