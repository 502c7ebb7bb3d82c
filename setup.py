#!/bin/env python

#######################################################################
#  Copyright (C) 2020 Vinh Tran
#
#  gfi integrates orthogroup fasta files of a gene family classification
#  into pre-computed scaffolds. gfi is a free software: you can
#  redistribute it and/or modify it under the terms of the GNU General
#  Public License as published by the Free Software Foundation, either
#  version 3 of the License, or (at your option) any later version.
#
#  gfi is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with gfi.  If not, see <http://www.gnu.org/licenses/>.
#
#######################################################################

from setuptools import setup, find_packages

with open("README.md", "r") as input:
    long_description = input.read()

setup(
    name="gfi",
    version="1.0.0",
    python_requires='>=3.7.0',
    description="Integrate gene families into pre-computed orthogroup scaffolds",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Vinh Tran",
    author_email="tran@bio.uni-frankfurt.de",
    packages=find_packages(),
    install_requires=[
        'biopython',
        'tqdm'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': ["integrateGF = gfi.integrateGF:main",
                            "setupGF = gfi.setupGF:main",
                            "showScaffolds = gfi.showScaffolds:main"],
    },
    license="GPL-3.0",
    classifiers=[
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
    ],
)
