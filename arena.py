# Arena-allocated lists.
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
Lists whose nodes live in a table rather than in objects of their own.

An arena holds two parallel Python lists, data and next; node i has element
data[i] and its successor is node next[i].  The index EMPTY (-1) is the
empty list.  A ref pairs an arena with an index and is what the list
algorithms walk.

Several lists can share one arena, and can share tails within it: consing
onto an existing ref reuses its nodes.
"""

from LinkedList import EmptyListError

EMPTY = -1

class arena(object):
    def __init__(self):
        self.data = []
        self.next = []

    def __len__(self):
        return len(self.data)

    def allocate(self, data, next = EMPTY):
        """
        Add a node and return its index.
        """
        if next != EMPTY and not 0 <= next < len(self.data):
            raise ValueError("no node %d in this arena" % next)
        self.data.append(data)
        self.next.append(next)
        return len(self.data) - 1

    def empty(self):
        return ref(self, EMPTY)

    def cons(self, data, tail):
        """
        Return a ref to a new node holding data, followed by the list tail
        (a ref into this same arena).
        """
        if tail.arena is not self:
            raise ValueError("tail belongs to a different arena")
        return ref(self, self.allocate(data, tail.index))

class ref(object):
    """
    A handle on the list starting at node index of an arena.

    Walking with .tail makes a new ref each step; refs are cursors, the
    nodes themselves are never copied.
    """
    def __init__(self, arena, index):
        self.arena = arena
        self.index = index

    def __bool__(self):
        return self.index != EMPTY

    @property
    def head(self):
        if not self: raise EmptyListError("End of list")
        return self.arena.data[self.index]

    @property
    def tail(self):
        if not self: raise EmptyListError("End of list")
        return ref(self.arena, self.arena.next[self.index])

    def __repr__(self):
        return "arena.ref(%d)" % self.index

def build(items, into = None):
    """
    Store items as a list in an arena (a new one unless into is given) and
    return a ref to its head.
    """
    a = arena() if into is None else into
    index = EMPTY
    for x in reversed(list(items)):
        index = a.allocate(x, index)
    return ref(a, index)
