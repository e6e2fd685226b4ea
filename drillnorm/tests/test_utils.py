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

import pytest

from ..cam import FileSettings
from ..utils import DrillUnit, HoleType, RegexMatcher


@pytest.mark.parametrize('token, expected', [
    ('012345', 1.2345),
    ('0123', 1.23),
    ('12', 12.0),
    ('1', 1.0),
    ('-012345', -1.2345),
    ('+05', 5.0),
    ('000005', 0.0005),
    ])
def test_leading_zero_mode(token, expected):
    settings = FileSettings(number_format=(2, 4), zeros='leading')
    assert settings.parse_excellon_value(token) == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize('token, expected', [
    ('12345', 1.2345),
    ('100', 0.01),
    ('1', 0.0001),
    ('-50000', -5.0),
    ('0', 0.0),
    ])
def test_trailing_zero_mode(token, expected):
    settings = FileSettings(number_format=(2, 4), zeros='trailing')
    assert settings.parse_excellon_value(token) == pytest.approx(expected, abs=1e-9)


def test_inch_conversion():
    settings = FileSettings(unit=DrillUnit.INCH, number_format=(2, 2), zeros='trailing')
    assert settings.parse_excellon_value('100') == pytest.approx(25.4)
    assert settings.parse_excellon_value('-50') == pytest.approx(-12.7)


@pytest.mark.parametrize('zeros', ['leading', 'trailing'])
def test_explicit_decimal_point(zeros):
    settings = FileSettings(number_format=(2, 4), zeros=zeros)
    assert settings.parse_excellon_value('12.5') == 12.5
    assert settings.parse_excellon_value('-0.25') == -0.25

    settings.unit = DrillUnit.INCH
    assert settings.parse_excellon_value('1.5') == pytest.approx(38.1)


@pytest.mark.parametrize('token', ['', 'abc', '1.2.3', '-', '12a', '.', '\u00b2', '\u0661\u0662', '1_0.5', '1_000', '1e3', '1.5e2'])
def test_unparsable_tokens_decode_to_zero(token):
    for zeros in ('leading', 'trailing'):
        settings = FileSettings(zeros=zeros)
        assert settings.parse_excellon_value(token) == 0.0


@pytest.mark.parametrize('value', [0.0, 1.2345, 12.5, -3.14159, 0.00001])
def test_fixed_width_tokens_recover_value(value):
    integer_digits, decimal_digits = 2, 5
    digits = f'{abs(value):0{integer_digits+decimal_digits+1}.{decimal_digits}f}'.replace('.', '')
    sign = '-' if value < 0 else ''

    lz = FileSettings(number_format=(integer_digits, decimal_digits), zeros='leading')
    assert lz.parse_excellon_value(sign + (digits.rstrip('0') or '0')) == pytest.approx(value, abs=1e-5)

    tz = FileSettings(number_format=(integer_digits, decimal_digits), zeros='trailing')
    assert tz.parse_excellon_value(sign + (digits.lstrip('0') or '0')) == pytest.approx(value, abs=1e-5)


def test_write_excellon_value():
    settings = FileSettings()
    assert settings.write_excellon_value(0.3) == '0.30000'
    assert settings.write_excellon_value(12.345678) == '12.34568'
    assert settings.write_excellon_value(-1.5) == '-1.50000'
    assert settings.write_excellon_value(-0.000001) == '0.00000'
    assert settings.write_excellon_value(-0.0) == '0.00000'


def test_settings_validation():
    settings = FileSettings()
    with pytest.raises(ValueError):
        settings.zeros = 'both'
    with pytest.raises(ValueError):
        settings.unit = 'mm'
    with pytest.raises(ValueError):
        settings.number_format = (2,)
    with pytest.raises(ValueError):
        FileSettings(number_format=(-1, 4))


def test_drill_unit():
    assert DrillUnit.INCH.to_mm(2) == pytest.approx(50.8)
    assert DrillUnit.METRIC.to_mm(2) == 2
    assert DrillUnit.from_keyword('inch') == DrillUnit.INCH
    assert DrillUnit.from_keyword('M71') == DrillUnit.METRIC
    with pytest.raises(ValueError):
        DrillUnit.from_keyword('FURLONG')


def test_hole_type_names():
    assert HoleType.PLATED.label == 'PLATED'
    assert HoleType.NON_PLATED.label == 'NON_PLATED'
    assert HoleType.PLATED.layer_name == 'PTH_Through'
    assert HoleType.NON_PLATED.layer_name == 'NPTH_Through'


def test_regex_matcher_first_match_wins():
    class Handler:
        exprs = RegexMatcher()

        def __init__(self):
            self.seen = []

        @exprs.match('T([0-9]+)C.*')
        def tool_def(self, match):
            self.seen.append(('def', match[1]))

        @exprs.match('T([0-9]+).*')
        def tool_sel(self, match):
            self.seen.append(('sel', match[1]))

    h = Handler()
    assert h.exprs.handle(h, 'T1C0.3')
    assert h.exprs.handle(h, 'T2')
    assert not h.exprs.handle(h, 'M48')
    assert h.seen == [('def', '1'), ('sel', '2')]
