"""
.. py:module:: din.text
   :synopsis: Character classification, tokenization, and collation of strings.

The modules build on each other, leaf-first:

* :mod:`din.text.tables` - immutable classification tables for U+0000..U+017E
* :mod:`din.text.dintok` - a tokenizer that folds letters and parses numbers
* :mod:`din.text.collate` - the three-level comparator and canonical keys

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
