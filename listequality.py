# List equality.
# Copyright 2012 Benoit Hudson
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
Structural equality of two lists, given a predicate on elements.
"""

import listoptions

def equals(a, b, elementEquals = None, options = listoptions.standard):
    """
    Return True if a and b have the same length and elementEquals holds for
    each pair of elements at the same position.

    Pairs are compared head to tail and we stop at the first one that
    differs, or as soon as one list runs out: elementEquals is called at most
    once per position, and never past the first mismatch.

    If elementEquals is None, use the one in options (== by default).
    """
    if elementEquals is None:
        elementEquals = options.elementEquals
    while a and b:
        if not elementEquals(a.head, b.head):
            return False
        a = a.tail
        b = b.tail
    # Equal only if both ran out at the same time.
    return not a and not b

def equalsRecursive(a, b, elementEquals = None, options = listoptions.standard):
    """
    Same answer as equals, written the structural way:
        equals(nil, nil)                   = True
        equals(nil, x:xs) = equals(x:xs, nil) = False
        equals(x:xs, y:ys)                 = x == y and equals(xs, ys)
    Uses one stack frame per matching position, so long lists will hit
    the recursion limit.
    """
    if elementEquals is None:
        elementEquals = options.elementEquals
    if not a or not b:
        return not a and not b
    if not elementEquals(a.head, b.head):
        return False
    return equalsRecursive(a.tail, b.tail, elementEquals)
