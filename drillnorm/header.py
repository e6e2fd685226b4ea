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
drillnorm.header
================
**Default comment header prepended to generated drill files**

:py:func:`.process_drill_files` accepts any callable with the signature of :py:func:`render_drill_header`, so callers
that need a particular vendor header can substitute their own.
"""

from datetime import datetime


def render_drill_header(hole_type_label, layer_name, now=None):
    """ Render the comment block that precedes ``M48`` in a generated drill file.

    :param str hole_type_label: ``'PLATED'`` or ``'NON_PLATED'``
    :param str layer_name: ``'PTH_Through'`` or ``'NPTH_Through'``
    :param datetime now: Timestamp to embed. Defaults to the current local time.
    :returns: One or more ``;`` comment lines, each terminated by a newline.
    :rtype: str
    """
    from . import __version__

    now = now or datetime.now()
    return (f';TYPE={hole_type_label}\n'
            f';Layer: {layer_name}\n'
            f';drillnorm {__version__}, {now:%Y-%m-%d %H:%M:%S}\n')
