#!/usr/bin/env python3

import re
from pathlib import Path
from setuptools import setup, find_packages

def version():
    init = Path(__file__).parent / 'drillnorm' / '__init__.py'
    return re.search(r"^__version__ = '([^']+)'", init.read_text(), re.MULTILINE)[1]

setup(
    name='drillnorm',
    version=version(),
    author='The drillnorm authors',
    description='Merge KiCad and Altium Excellon drill files into canonical PTH and NPTH drill files',
    long_description=Path('README.md').read_text(),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    install_requires=['click'],
    extras_require={
        'tests': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'drillnorm = drillnorm.cli:cli',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Manufacturing',
        'License :: OSI Approved :: Apache Software License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)',
        'Topic :: Utilities',
    ],
    keywords='excellon drill pcb kicad altium',
    python_requires='>=3.10',
)
