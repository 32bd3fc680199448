# List length.
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

# Three ways to count the nodes of a list.  The first two are the steps of
# the derivation; only length() is safe on long lists.
#
#   length(nil)   = 0
#   length(x:xs)  = 1 + length(xs)

def lengthRecursive(l):
    if not l: return 0
    return 1 + lengthRecursive(l.tail)

def lengthAccumulating(l, n = 0):
    """
    Pass the count down instead of adding on the way back up.
    The recursive call is now the last thing we do, but Python doesn't
    turn that into a jump, so this still uses a frame per node.
    """
    if not l: return n
    return lengthAccumulating(l.tail, n + 1)

def length(l):
    """
    Return the number of nodes in l, in constant space: lengthAccumulating
    with the recursion turned into a loop.
    """
    n = 0
    while l:
        n += 1
        l = l.tail
    return n
