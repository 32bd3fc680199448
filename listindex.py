# Indexed access into lists.
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

import logging

import listoptions

logger = logging.getLogger(__name__)

###########################################################################
# This exception is thrown when we ask for an element past the end of a list
# (or before its start).
#
# index is what the caller asked for.  remaining is what was left on the
# countdown when we ran out of list: index minus the length of the list.
# It is None for negative indices, where we never walk at all.
class ElementIndexError(IndexError):
    def __init__(self, index, remaining, reportRemaining = False):
        self.index = index
        self.remaining = remaining
        if remaining is None:
            msg = "negative list index %d" % index
        elif reportRemaining:
            msg = "list index out of range, %d left to go at the end" % remaining
        else:
            msg = "list index %d out of range" % index
        IndexError.__init__(self, msg)

###########################################################################

def _outOfRange(index, remaining, options):
    logger.debug("elementAt(%d) ran off the end with %d to go",
            index, remaining)
    return ElementIndexError(index, remaining, options.reportRemaining)

def elementAt(l, index, options = listoptions.standard):
    """
    Return the element at position index of l: 0 is the head, and position
    i > 0 is position i-1 of the tail.

    Raise ElementIndexError (an IndexError) if l has no such position.
    """
    if index < 0:
        raise ElementIndexError(index, None)
    remaining = index
    while l:
        if remaining == 0:
            return l.head
        remaining -= 1
        l = l.tail
    raise _outOfRange(index, remaining, options)

def elementAtRecursive(l, index, options = listoptions.standard):
    """
    The structural version of elementAt, with the same results and errors.
    One stack frame per position skipped.
    """
    if index < 0:
        raise ElementIndexError(index, None)
    def at(l, i):
        if not l: raise _outOfRange(index, i, options)
        if i == 0: return l.head
        return at(l.tail, i - 1)
    return at(l, index)
