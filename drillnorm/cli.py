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

import sys
import warnings
import zipfile
from pathlib import Path

import click

from . import __version__
from .detect import classify, identify_software, is_drill_file, is_through_drill
from .pipeline import process_drill_files


OUTPUT_NAMES = {
    'pth': 'Drill_PTH_Through.DRL',
    'npth': 'Drill_NPTH_Through.DRL',
}


def _showwarning(message, category, filename, lineno, file=None, line=None):
    if file is None:
        file = sys.stderr

    print(f'{category.__name__}: {message}', file=file)
warnings.showwarning = _showwarning

def _print_version(ctx, param, value):
    if value and not ctx.resilient_parsing:
        click.echo(f'Version {__version__}')
        ctx.exit()


def _read_inputs(paths):
    """ Collect ``(name, content)`` of all drill files in the given files, directories and zip archives. """
    for path in paths:
        if path.is_dir():
            for child in sorted(path.glob('**/*')):
                if child.is_file() and is_drill_file(child.name):
                    yield child.name, child.read_text(errors='replace')

        elif zipfile.is_zipfile(path):
            with zipfile.ZipFile(path) as archive:
                for info in archive.infolist():
                    if not info.is_dir() and is_drill_file(info.filename):
                        yield Path(info.filename).name, archive.read(info).decode(errors='replace')

        elif is_drill_file(path.name):
            yield path.name, path.read_text(errors='replace')

        else:
            warnings.warn(f'{path} does not look like a drill file. Ignoring.')


@click.group()
@click.option('--version', is_flag=True, callback=_print_version, expose_value=False, is_eager=True)
def cli():
    """ The drillnorm CLI merges the drill files of a PCB design into one plated and one non-plated drill file. """
    pass


@cli.command()
@click.option('--warnings', 'format_warnings', type=click.Choice(['default', 'ignore', 'once']), default='default',
              help='''Enable or disable file format warnings during parsing (default: on)''')
@click.option('-o', '--output-dir', type=click.Path(file_okay=False, path_type=Path), default='.',
              help='''Directory to write Drill_PTH_Through.DRL and Drill_NPTH_Through.DRL to. Created if it does not
              exist. Default: current directory''')
@click.argument('inputs', nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
def merge(inputs, output_dir, format_warnings):
    """ Merge drill files, directories or zip archives of drill files into canonical PTH and NPTH drill files. """

    with warnings.catch_warnings():
        warnings.simplefilter(format_warnings)
        files = list(_read_inputs(inputs))
        result = process_drill_files([content for _name, content in files], [name for name, _content in files])

    for msg in result.warnings:
        click.echo(f'Warning: {msg}', err=True)

    if not result.has_pth and not result.has_npth:
        raise click.ClickException('No through holes found in any of the input files.')

    output_dir.mkdir(parents=True, exist_ok=True)
    for key, content in (('pth', result.pth_content), ('npth', result.npth_content)):
        if content is not None:
            out = output_dir / OUTPUT_NAMES[key]
            out.write_text(content)
            click.echo(f'Wrote {out}')


@cli.command()
@click.argument('files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
def identify(files):
    """ Print the detected dialect and generator of drill files. """

    for path in files:
        content = path.read_text(errors='replace')
        software = identify_software(content) or 'unknown software'
        kind = 'through holes' if is_through_drill(path.name) else 'blind/buried vias'
        click.echo(f'{path.name}: {classify(content).value} dialect, {software}, {kind}')


if __name__ == '__main__':
    cli()
