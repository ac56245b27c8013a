"""
.. py: module:: columns
   : synopsis: Read the lines of text streams with their sort fields.

A line is sorted either as a whole or by one of its (separated) columns; lines
that have too few columns are sorted by an empty field.

.. License: GNU Affero GPL v3 (http: //www.gnu.org/licenses/agpl.html)
"""
import logging

logger = logging.getLogger(__name__)


def GetField(line: str, column: int=None, sep: str='\t') -> str:
    """
    Return the (1-based) *column* of a *line* split at *sep*, the entire line
    if *column* is ``None``, or ``None`` if the line has too few columns.
    """
    if column is None:
        return line

    if column < 1:
        raise ValueError('column must be a positive integer; got %r' % column)

    items = line.split(sep)

    if column > len(items):
        return None

    return items[column - 1]


def ReadRows(streams, column: int=None, sep: str='\t') -> list:
    """
    Return a list of ``(field, line)`` pairs for all lines in the *streams*,
    without their line endings.
    """
    rows = []

    for stream in streams:
        name = getattr(stream, 'name', '?')

        for num, line in enumerate(stream, 1):
            line = line.rstrip('\r\n')
            field = GetField(line, column, sep)

            if field is None:
                logger.warning('%s:%i has no column %i', name, num, column)
                field = ''

            rows.append((field, line))

    logger.info('read %i lines', len(rows))
    return rows
