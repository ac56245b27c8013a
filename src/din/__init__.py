"""
.. py:module:: din
   :synopsis: DIN 5007 string collation for Python.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""

__version__ = '0.0.1'
