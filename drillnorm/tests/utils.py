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

import textwrap

__all__ = ['ALTIUM_COMPOSITE', 'ALTIUM_INCH_TZ', 'KICAD_PTH', 'KICAD_NPTH', 'altium_single_hole', 'kicad_file',
           'plain_header', 'body_lines']


def _dedent(text):
    return textwrap.dedent(text).lstrip('\n')


ALTIUM_COMPOSITE = _dedent('''
    M48
    ;Layer_Color=9474304
    ;FILE_FORMAT=2:5
    METRIC,LZ
    ;TYPE=PLATED
    T1F00S00C0.30000
    T2F00S00C1.00000
    ;TYPE=NON_PLATED
    T3F00S00C3.20000
    %
    T01
    X0100000Y0200000
    X0150000
    T02
    G00X0050000Y0050000
    M15
    G01X0080000Y0050000
    M16
    G05
    T03
    X0000000Y0000000
    M30
    ''')

ALTIUM_INCH_TZ = _dedent('''
    M48
    ;FILE_FORMAT=2:4
    INCH,TZ
    ;TYPE=PLATED
    T1F00S00C0.0394
    %
    T01
    X10000Y5000
    X-2500
    M30
    ''')

KICAD_PTH = _dedent('''
    M48
    ; DRILL file {KiCad 7.0.1} date 2023-05-01T12:00:00
    ; FORMAT={-:-/ absolute / metric / decimal}
    ; #@! TF.FileFunction,Plated,1,2,PTH
    FMAT,2
    METRIC
    ; #@! TA.AperFunction,Plated,PTH,ComponentDrill
    T1C1.000
    ; #@! TA.AperFunction,Plated,PTH,ViaDrill
    T2C0.300
    %
    G90
    G05
    T1
    X10.0Y20.0
    X12.54Y20.0
    T2
    G00X100.0Y200.0
    M15
    G01X300.0Y200.0
    M16
    G05
    T0
    M30
    ''')

KICAD_NPTH = _dedent('''
    M48
    ; DRILL file {KiCad 7.0.1} date 2023-05-01T12:00:00
    ; FORMAT={-:-/ absolute / metric / decimal}
    ; #@! TF.FileFunction,NonPlated,1,2,NPTH
    FMAT,2
    METRIC
    T1C3.200
    %
    G90
    G05
    T1
    X5.0Y-5.0
    T0
    M30
    ''')


def altium_single_hole(diameter, x, y):
    """ Minimal Altium file with one plated tool and one hole. Coordinates given as 2:5 LZ tokens. """
    return _dedent(f'''
        M48
        ;FILE_FORMAT=2:5
        METRIC,LZ
        ;TYPE=PLATED
        T1F00S00C{diameter}
        %
        T01
        X{x}Y{y}
        M30
        ''')


def kicad_file(*tools, plated=True):
    """ Minimal metric KiCad file. ``tools`` are ``(diameter, [(x, y), ...])`` tuples. """
    function = 'Plated,1,2,PTH' if plated else 'NonPlated,1,2,NPTH'
    lines = ['M48', '; DRILL file {KiCad 7.0.1}', f'; #@! TF.FileFunction,{function}', 'METRIC']
    lines += [ f'T{i}C{diameter:.3f}' for i, (diameter, _holes) in enumerate(tools, start=1) ]
    lines += ['%', 'G90', 'G05']
    for i, (_diameter, holes) in enumerate(tools, start=1):
        lines.append(f'T{i}')
        lines += [ f'X{x}Y{y}' for x, y in holes ]
    lines += ['T0', 'M30']
    return '\n'.join(lines) + '\n'


def plain_header(label, layer):
    return f';TYPE={label}\n;Layer: {layer}\n'


def body_lines(text):
    """ Lines of a generated drill file following the ``%`` header terminator. """
    lines = text.splitlines()
    return lines[lines.index('%')+1:]
