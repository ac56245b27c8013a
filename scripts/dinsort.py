#!/usr/bin/env python3

"""sort lines of text in DIN 5007 order"""

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from argparse import ArgumentParser
import logging
import os
import sys

from din import __version__
from din.text.collate import Canonical, Collator
from din.text.columns import ReadRows


def write(rows, collator, reverse=False, unique=False, keys=False):
    """Print the sorted lines."""
    last = None
    rows = sorted(rows, key=lambda row: (collator.key(row[0]),
                                         collator.key(row[1])),
                  reverse=reverse)

    for field, line in rows:
        if unique and line == last:
            continue

        if keys:
            print(Canonical(field), line, sep='\t')
        else:
            print(line)

        last = line


epilog = 'system (default) encoding: {}'.format(sys.getdefaultencoding())
parser = ArgumentParser(
    usage='%(prog)s [options] [FILE ...]',
    description=__doc__, epilog=epilog,
    prog=os.path.basename(sys.argv[0])
)

parser.set_defaults(loglevel=logging.WARNING)
parser.add_argument('files', metavar='FILE', nargs='*', type=open,
                    help='input file(s); if absent, read from <STDIN>')
parser.add_argument('-c', '--column', metavar='COL', type=int,
                    help='sort by the (1-based) column COL')
parser.add_argument('-s', '--separator', metavar='SEP', default='\t',
                    help='column separator [\\t]')
parser.add_argument('-r', '--reverse', action='store_true',
                    help='sort in descending order')
parser.add_argument('-u', '--unique', action='store_true',
                    help='print identical lines only once')
parser.add_argument('-k', '--keys', action='store_true',
                    help='print the canonical sort key before each line')
parser.add_argument('--inert-case', action='store_false', dest='case_pass',
                    help='do not order upper before lower case; '
                         'use code points only')
parser.add_argument('--version', action='version', version=__version__)
parser.add_argument('--error', action='store_const', const=logging.ERROR,
                    dest='loglevel', help='error log level only [warn]')
parser.add_argument('--info', action='store_const', const=logging.INFO,
                    dest='loglevel', help='info log level [warn]')
parser.add_argument('--debug', action='store_const', const=logging.DEBUG,
                    dest='loglevel', help='debug log level [warn]')
parser.add_argument('--logfile', metavar='FILE',
                    help='log to file instead of <STDERR>')

args = parser.parse_args()

if args.column is not None and args.column < 1:
    parser.error('COL must be a positive integer')

logging.basicConfig(
    filename=args.logfile, level=args.loglevel,
    format='%(asctime)s %(name)s %(levelname)s: %(message)s'
)

files = args.files if args.files else [sys.stdin]

try:
    write(ReadRows(files, args.column, args.separator),
          Collator(args.case_pass), reverse=args.reverse,
          unique=args.unique, keys=args.keys)
except Exception:
    logging.exception("unexpected program error")
    parser.error("unexpected program error")
