# Mutable singly linked chains.
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
The in-place flavour of a list: plain nodes whose data and next can be
reassigned.  There is no separate empty value; a chain ends where next is
None, and None on its own is the empty chain.
"""

from LinkedList import elements

class node(object):
    def __init__(self, data, next = None):
        self.data = data
        self.next = next

    # head and tail let the list algorithms walk a chain.  Since None is
    # falsy and a node is not, "while l:" stops at the end.
    @property
    def head(self): return self.data

    @property
    def tail(self): return self.next

    def __repr__(self):
        return "chain(%s)" % ', '.join(map(repr, elements(self)))

def fromIterable(items):
    """
    Return the head node of a new chain holding items, or None if there are
    none.
    """
    head = None
    for x in reversed(list(items)):
        head = node(x, head)
    return head

def toList(head):
    return list(elements(head))
