###
### Adapted from http://stackoverflow.com/questions/280243/python-linked-list
###
### I removed a number of functions that I want to avoid ever using.

"""
A list is either empty (nil) or a node holding a head and a tail.

Everything else in this family of modules walks a list using three things
only: truthiness (an empty list is false), .head and .tail.  The mutable
chains in chain.py and the arena lists in arena.py follow the same rules, so
the algorithms run on any of them.
"""

import logging
import operator

from listequality import equals
from listindex import elementAt
from listlength import length

logger = logging.getLogger(__name__)

###########################################################################
# Raised when we ask the empty list for a part it doesn't have.
class EmptyListError(IndexError):
    pass

###########################################################################

class LinkedList(object):
    """Immutable linked list class."""

    def __new__(cls, l = ()):
        if isinstance(l, LinkedList): return l # Immutable, so no copy needed.
        if l is None: return cls.nil # the empty chain
        # Chains and arena refs aren't iterable; walk them by head and tail.
        if hasattr(type(l), 'head') and hasattr(type(l), 'tail'):
            l = elements(l)

        # Build back to front: recurring on the tail would use one stack
        # frame per element.
        result = cls.nil
        for x in reversed(list(l)):
            result = cls.cons(x, result)
        return result

    @classmethod
    def cons(cls, head, tail):
        if not isinstance(tail, LinkedList):
            tail = LinkedList(tail)
        obj = object.__new__(LinkedList)
        obj._head = head
        obj._tail = tail
        return obj

    # head and tail are not modifiable
    @property
    def head(self): return self._head

    @property
    def tail(self): return self._tail

    def __bool__(self): return True

    def __len__(self):
        return length(self)

    def __iter__(self):
        x=self
        while x:
            yield x.head
            x=x.tail

    def __getitem__(self, i):
        if not isinstance(i, int):
            raise TypeError("LinkedList indices must be integers, not %s"
                    % type(i).__name__)
        return elementAt(self, i)

    def __eq__(self, other):
        if not isinstance(other, LinkedList): return NotImplemented
        # Always plain ==, whatever the default options say, to agree with
        # __hash__.
        return equals(self, other, operator.eq)

    def __hash__(self):
        return hash(tuple(self))

    # copy and pickle rebuild through the constructor, so nil stays unique.
    def __reduce__(self):
        return (LinkedList, (tuple(self),))

    def __repr__(self):
        return "LinkedList([%s])" % ', '.join(map(repr,self))

class EmptyList(LinkedList):
    """A singleton representing an empty list."""
    def __new__(cls):
        return object.__new__(cls)

    def __iter__(self): return iter(())
    def __bool__(self): return False

    @property
    def head(self): raise EmptyListError("End of list")

    @property
    def tail(self): raise EmptyListError("End of list")

# Create EmptyList singleton
LinkedList.nil = EmptyList()
del EmptyList

nil = LinkedList.nil
cons = LinkedList.cons

###########################################################################
# Utilities shared by the rest of the list family.  They accept any list
# value, not just a LinkedList.

def elements(l):
    """
    Yield the elements of l from head to tail.
    """
    while l:
        yield l.head
        l = l.tail

def reverse(l):
    """
    Return a new LinkedList with the elements of l in the opposite order.
    One node is allocated per element; l itself is untouched.
    """
    result = nil
    n = 0
    while l:
        result = cons(l.head, result)
        l = l.tail
        n += 1
    logger.debug("reversed %d elements", n)
    return result

def snoc(l, x):
    """
    Return a new LinkedList holding the elements of l followed by x.
    """
    return reverse(cons(x, reverse(l)))
