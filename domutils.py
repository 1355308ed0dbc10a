#!/usr/bin/env python3
#
# domutils: Small helpers for DOM manipulation code: classify values and
# strings, convert identifier case, walk node lists without building
# wrappers, and deep-copy nodes away from their document.
#
from typing import Any, Callable, List, Sequence, TypeVar, Union
import logging

from domenums import RWord
from basedom import Node, Document, AnyNode, isTag
from domstrings import camelCase, cssCase, isHtml
from domoptions import DomUtilOptions, defaultOptions

lg = logging.getLogger("domutils")

__metadata__ = {
    "title"        : "domutils",
    "description"  : "Utility functions used by DOM manipulation code.",
    "rightsHolder" : "Steven J. DeRose",
    "creator"      : "http://viaf.org/viaf/50334488",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2024-08",
    "modified"     : "2025-04-01",
    "publisher"    : "http://github.com/sderose",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']

__all__ = [
    "isTag", "isNodeSelection", "camelCase", "cssCase",
    "domEach", "cloneDom", "isHtml", "SELECTION_MARKER",
]

SELECTION_MARKER = RWord.SELECTION_MARKER

SeqT = TypeVar("SeqT", bound=Sequence)


###############################################################################
#
def isNodeSelection(value:Any, options:DomUtilOptions=None) -> bool:
    """Is 'value' a NodeSelection (or anything else carrying the marker)?
    This goes by the marker attribute alone, not by class.
    None is just not one, unless options.strictSelectionCheck is set,
    in which case it's a TypeError (as callers used to get).
    """
    if value is None:
        if (options or defaultOptions).strictSelectionCheck: raise TypeError(
            f"Cannot read '{SELECTION_MARKER}' of None.")
        return False
    return getattr(value, SELECTION_MARKER, None) is not None


###############################################################################
#
def domEach(seq:SeqT, fn:Callable[[AnyNode, int], Any],
    options:DomUtilOptions=None) -> SeqT:
    """Call fn(item, index) for each item of 'seq', without creating an
    intermediate NodeSelection. Returns 'seq' itself, for chaining.

    The length is taken once, before starting. By default the items are
    copied out first too, so a callback that changes 'seq' (say, by
    removing a child from the node being walked) doesn't cause skips or
    an IndexError. Whatever fn returns is ignored.
    """
    n = len(seq)
    if (options or defaultOptions).snapshotEach:
        items = [ seq[i] for i in range(n) ]
        for i in range(n): fn(items[i], i)
    else:
        for i in range(n): fn(seq[i], i)
    return seq


###############################################################################
#
def cloneDom(dom:Union[AnyNode, Sequence[AnyNode]]) -> List[AnyNode]:
    """Deep-copy a node, or each node in a list, and return a (new) list
    of the copies. The copies are put under a new Document, so they have a
    parentNode (and that as ownerDocument), instead of being loose or still
    belonging to the source document. The source nodes are not touched.

    Nodes are lists (of their children), so check for a single Node first.
    Anything cloneNode() or the Document raises (say, for a Document among
    the inputs, which can't be a child) just propagates.
    """
    if isinstance(dom, Node):
        clones = [ dom.cloneNode(deep=True) ]
    else:
        clones = [ node.cloneNode(deep=True) for node in dom ]

    root = Document(childNodes=clones)
    lg.debug("Cloned %d node(s) under new %s.", len(clones), root.nodeName)
    return clones
