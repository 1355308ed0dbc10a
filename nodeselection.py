#!/usr/bin/env python3
#
# nodeselection: A list of nodes picked out of one or more trees, which
# manipulation code can walk or copy as a unit.
#
from typing import Any, Callable, Iterable, List, Union
import logging

from basedom import Node, AnyNode
from domutils import domEach, cloneDom
from domoptions import DomUtilOptions

lg = logging.getLogger("nodeselection")


###############################################################################
#
class NodeSelection(list):
    """Unlike a Node, this does not own its members: adding a node here does
    not change its parentNode, and a node can be in many selections.
    It is recognized (see domutils.isNodeSelection()) by the marker attribute
    named by SELECTION_MARKER, not by class.
    """
    nodeSelection = "[NodeSelection object]"

    def __init__(self, nodes:Iterable[AnyNode]=None, options:DomUtilOptions=None):
        if isinstance(nodes, Node): nodes = [ nodes ]
        super().__init__(nodes or [])
        self.options = options

    def __repr__(self) -> str:
        return f"<NodeSelection of {len(self)} node(s)>"

    @property
    def length(self) -> int:
        return len(self)

    def get(self, i:int=None) -> Union[AnyNode, List[AnyNode]]:
        """With no index, a plain list of all the nodes; else the one at 'i'
        (negative counts from the end), or None if out of range.
        """
        if i is None: return list(self)
        if i < -len(self) or i >= len(self): return None
        return self[i]

    def each(self, fn:Callable[[AnyNode, int], Any]) -> 'NodeSelection':
        return domEach(self, fn, options=self.options)

    def clone(self) -> 'NodeSelection':
        """A new selection, of deep copies of the nodes in this one.
        """
        lg.debug("Cloning %d node(s).", len(self))
        return NodeSelection(cloneDom(self), options=self.options)
