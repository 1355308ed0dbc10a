#!/usr/bin/env python3
#
# domenums: Node kinds and reserved names for the small DOM in basedom.
#
from typing import Any, Union
from enum import Enum
from types import SimpleNamespace

__metadata__ = {
    "title"        : "domenums",
    "description"  : "Node kinds and reserved names for basedom and domutils.",
    "rightsHolder" : "Steven J. DeRose",
    "creator"      : "http://viaf.org/viaf/50334488",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2016-02-06",
    "modified"     : "2025-04-01",
    "publisher"    : "http://github.com/sderose",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']


###############################################################################
#
class FlexibleEnum(Enum):
    """Subclass from this to make enums that can construct from any of:
        E.XYZ       -- the usual enumclass.name form,
        E(E.XYZ)    -- an instance of the Enum as argument,
        E("XYZ")    -- a string that matches a member name,
        E(1)        -- a value of a member.
    """
    @classmethod
    def _missing_(cls, value: Any):
        """Handle cases where the value isn't a proper instance already.
        """
        if isinstance(value, str):
            try:
                return cls[value]
            except KeyError:
                for member in cls:
                    if member.value == value: return member
        return None

    def tostring(self) -> str:
        return self.name


###############################################################################
#
class NodeType(FlexibleEnum):
    ABSTRACT_NODE                = 0  # Not in DOM
    ELEMENT_NODE                 = 1
    ATTRIBUTE_NODE               = 2
    TEXT_NODE                    = 3
    CDATA_SECTION_NODE           = 4
    PROCESSING_INSTRUCTION_NODE  = 7
    COMMENT_NODE                 = 8
    DOCUMENT_NODE                = 9
    DOCUMENT_TYPE_NODE           = 10
    DOCUMENT_FRAGMENT_NODE       = 11

    @staticmethod
    def okNodeType(nt:Union[int, 'NodeType'], die:bool=True) -> 'NodeType':
        """Check a nodeType property. You can pass either a NodeType or an int,
        (so people who remember the ints and just test are still ok).
        Returns the actual NodeType.x (or None on fail).
        """
        if isinstance(nt, NodeType): return nt
        try:
            return NodeType(nt)
        except ValueError:
            if not die: return None
            raise


### Constants
#
RWord = SimpleNamespace(**{
    # Reserved nodeNames
    # (PI and ELEMENT use actual names)
    "NN_TEXT"        : "#text",
    "NN_COMMENT"     : "#comment",
    "NN_CDATA"       : "#cdata-section",
    "NN_DOCUMENT"    : "#document",
    "NN_FRAGMENT"    : "#document-fragment",

    # Attribute a NodeSelection carries, so it can be recognized by duck-typing.
    "SELECTION_MARKER" : "nodeSelection",
})
