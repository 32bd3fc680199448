# Options for the list algorithms.
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
import operator

class listoptions(object):
    """
    Represent some standard options that don't depend on which
    algorithm you're calling, but which affect several of them.

    elementEquals: the predicate equals() uses when the caller doesn't
        pass one.
    reportRemaining: when elementAt runs off the end of a list, say how many
        nodes were missing rather than which index was asked for.  The
        exception carries both either way.
    """
    def __init__(self, elementEquals = operator.eq, reportRemaining = False):
        self.elementEquals = elementEquals
        self.reportRemaining = reportRemaining

standard = listoptions()

def setupLogging(level = "INFO"):
    """
    Send log records to stderr in a human-readable format.
    Call once, from a script; the library modules only ever get loggers.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
