# The last element of a list, and everything before it.
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
last and init split a non-empty list at its final node:

    last(x:nil)  = x            init(x:nil)  = nil
    last(x:xs)   = last(xs)     init(x:xs)   = x : init(xs)

Both raise EmptyListError on nil.  init always returns a new immutable
LinkedList, whatever kind of list it was given; dropLast is the in-place
version for mutable chains.
"""

import logging

from LinkedList import LinkedList, EmptyListError, cons, nil

logger = logging.getLogger(__name__)

def _empty(what):
    logger.debug("%s of an empty list", what)
    return EmptyListError("%s of an empty list" % what)

def last(l):
    """
    Return the element in the final node of l.
    One cursor and a one-node lookahead: stop at the node whose tail is
    empty.
    """
    if not l: raise _empty("last")
    while l.tail:
        l = l.tail
    return l.head

def init(l):
    """
    Return a new LinkedList with every element of l but the last, in order.

    We walk l once, keeping the elements in a buffer, and build the result
    back to front.  That is one new node per kept element and no recursion;
    l is untouched and its final node isn't referenced by the result.
    """
    if not l: raise _empty("init")
    kept = []
    while l.tail:
        kept.append(l.head)
        l = l.tail
    logger.debug("init kept %d elements", len(kept))
    return LinkedList(kept)

def initRecursive(l):
    """
    init written the structural way; one stack frame per element.
    """
    if not l: raise _empty("init")
    if not l.tail: return nil
    return cons(l.head, initRecursive(l.tail))

def dropLast(head):
    """
    Unlink the final node of a mutable chain (see chain.py) and return the
    chain's head, which is None if head was its only node.
    """
    if head is None: raise _empty("dropLast")
    if head.next is None: return None
    n = head
    while n.next.next is not None:
        n = n.next
    n.next = None
    return head
