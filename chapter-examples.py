#! /usr/bin/env python3

# Print the worked examples: each algorithm on the same small lists, in all
# three representations, plus the failures callers are expected to catch.

import operator

import arena
import chain
import listoptions
from LinkedList import LinkedList, EmptyListError, nil, snoc
from listequality import equals, equalsRecursive
from listindex import elementAt, ElementIndexError
from listlength import length, lengthRecursive
from lastinit import last, init

listoptions.setupLogging("DEBUG")

oneTwoThree = LinkedList([1, 2, 3])

print ("equals([1,2,3], [1,2,3]) = %s" %
    equals(oneTwoThree, LinkedList([1, 2, 3]), operator.eq))
print ("equals([1,2], [1,2,3])   = %s" %
    equals(LinkedList([1, 2]), oneTwoThree, operator.eq))
print ("equals([], [])           = %s" % equals(nil, nil, operator.eq))
print ("equalsRecursive agrees   = %s" %
    (equalsRecursive(oneTwoThree, oneTwoThree) == equals(oneTwoThree, oneTwoThree)))

for (name, l) in (("LinkedList", oneTwoThree),
                  ("chain", chain.fromIterable([1, 2, 3])),
                  ("arena", arena.build([1, 2, 3]))):
    print ("%s: length %d, element 1 is %r, last is %r, init is %r" %
        (name, length(l), elementAt(l, 1), last(l), init(l)))

print ("length(nil) = %d, lengthRecursive(nil) = %d" %
    (length(nil), lengthRecursive(nil)))

# A long list: the loops don't care, the recursive forms would.
big = LinkedList(range(100000))
print ("length of a 100000-element list: %d" % length(big))

try:
    elementAt(oneTwoThree, 3)
except ElementIndexError as e:
    print ("elementAt([1,2,3], 3): %s" % e)

try:
    elementAt(oneTwoThree, 5, options = listoptions.listoptions(reportRemaining = True))
except ElementIndexError as e:
    print ("elementAt([1,2,3], 5): %s" % e)

try:
    last(nil)
except EmptyListError as e:
    print ("last([]): %s" % e)

print ("snoc(init(l), last(l)) == l: %s" %
    equals(snoc(init(oneTwoThree), last(oneTwoThree)), oneTwoThree))
