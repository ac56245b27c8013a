#!/usr/bin/env python3
import re

from setuptools import setup

with open('src/din/__init__.py') as init:
    VERSION = re.search(r"^__version__ = '([^']+)'", init.read(), re.M).group(1)

setup(
    name='libdin',
    version=VERSION,
    license='GNU Affero GPL v3',
    description='DIN 5007 string collation: compare, sort, and canonicalize '
                'strings the way German dictionaries and phone books do',
    long_description=open('README.rst').read(),
    install_requires=[
        'unidecode',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=[
        'din',
        'din.text',
    ],
    package_dir={'': 'src'},
    scripts=[
        'scripts/dinsort.py',
    ],
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Environment :: Console',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Text Processing :: Linguistic',
    ],
)
