#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# basedom: A small pure Python DOM, with just the node kinds, tree links,
# and cloning that domutils and NodeSelection need.
#
#pylint: disable=W0212
#
from typing import Any, Callable, Dict, Iterable, Union
import re
import logging

from domenums import NodeType, RWord
from domexceptions import HReqE, ICharE, NSuppE, NotFoundError

lg = logging.getLogger("basedom")

__metadata__ = {
    "title"        : "basedom",
    "description"  : "A small, Pythonic DOM-ish implementation.",
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

badNameChars_re = re.compile(r"[\s<>/]")


###############################################################################
#
def isTag(node:Any) -> bool:
    """Is the value an element? <script> and <style> are just elements here,
    so they count. Anything else (including None, or a string) is False.
    """
    return getattr(node, "nodeType", None) is NodeType.ELEMENT_NODE


###############################################################################
#
class NodeList(list):
    """A plain list of nodes, that does not own them (no parentNode changes).
    """
    @property
    def length(self) -> int:
        return len(self)

    def item(self, index:int) -> 'Node':
        if index < 0 or index >= len(self): return None
        return self[index]


###############################################################################
#
class Node(list):
    """The base class for all the node types.

    We make this a direct subclass of list (of its childNodes). This gets many
    useful and hopefully intuitive features. However, it has some side effects:
      * Since Nodes know where they are (parent/owner), insert/del are special.
      * Empty nodes (no childNodes) are not usefully False, b/c they are not
        all identical. So bool() is special.
      * Two distinct nodes are never ==, even if they look alike. Use
        isEqualNode() for that.
    """
    ABSTRACT_NODE               = NodeType.ABSTRACT_NODE
    ELEMENT_NODE                = NodeType.ELEMENT_NODE
    TEXT_NODE                   = NodeType.TEXT_NODE
    CDATA_SECTION_NODE          = NodeType.CDATA_SECTION_NODE
    PROCESSING_INSTRUCTION_NODE = NodeType.PROCESSING_INSTRUCTION_NODE
    COMMENT_NODE                = NodeType.COMMENT_NODE
    DOCUMENT_NODE               = NodeType.DOCUMENT_NODE
    DOCUMENT_FRAGMENT_NODE      = NodeType.DOCUMENT_FRAGMENT_NODE

    def __init__(self, ownerDocument:'Document'=None, nodeName:str=None):
        super().__init__()
        self.ownerDocument = ownerDocument
        self.parentNode = None
        self.nodeType = Node.ABSTRACT_NODE
        self.nodeName = nodeName
        self.userData = None

    def __bool__(self) -> bool:
        """A node can be empty but still meaningful (think hr or br in HTML).
        That is not like 0, [], or {}, and so we want it to test True.
        """
        return True

    def __eq__(self, other:Any) -> bool:
        return self is other

    def __ne__(self, other:Any) -> bool:
        return self is not other

    def __hash__(self) -> int:
        return id(self)

    def __contains__(self, item:'Node') -> bool:
        """Careful, Python and DOM "contains" are different:
            x.__contains__(y) is non-recursive.
            x.contains(y) is recursive.
        """
        return getattr(item, "parentNode", None) is self

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self.nodeName}' ({len(self)} children)>"

    @property
    def canHaveChildren(self) -> bool:
        return self.nodeType in [
            Node.ELEMENT_NODE, Node.DOCUMENT_NODE, Node.DOCUMENT_FRAGMENT_NODE ]

    @property
    def childNodes(self) -> 'Node':
        """Unlike what the DOM IDL says, childNodes here is just the Node,
        not an instance variable *in* a Node.
        """
        return self

    @property
    def firstChild(self) -> 'Node':
        if len(self) == 0: return None
        return self[0]

    @property
    def lastChild(self) -> 'Node':
        if len(self) == 0: return None
        return self[-1]

    @property
    def nodeValue(self) -> str:
        return None

    @property
    def isElement(self) -> bool:
        return self.nodeType == Node.ELEMENT_NODE
    @property
    def isText(self) -> bool:
        return self.nodeType == Node.TEXT_NODE
    @property
    def isCDATA(self) -> bool:
        return self.nodeType == Node.CDATA_SECTION_NODE
    @property
    def isPI(self) -> bool:
        return self.nodeType == Node.PROCESSING_INSTRUCTION_NODE
    @property
    def isComment(self) -> bool:
        return self.nodeType == Node.COMMENT_NODE
    @property
    def isDocument(self) -> bool:
        return self.nodeType == Node.DOCUMENT_NODE
    @property
    def isFragment(self) -> bool:
        return self.nodeType == Node.DOCUMENT_FRAGMENT_NODE

    def contains(self, other:'Node') -> bool:
        """UNLIKE __contains__, this includes indirect descendants!
        Do NOT search all descendants, just check reverse ancestry.
        """
        cur = getattr(other, "parentNode", None)
        while cur is not None:
            if cur is self: return True
            cur = cur.parentNode
        return False

    def descendants(self, test:Callable=None, includeSelf:bool=False) -> Iterable['Node']:
        """Generate all descendants in document order.
        If 'test' is set, only the ones for which it returns Trueish.
        """
        if includeSelf and (test is None or test(self)): yield self
        for cur in self:
            if test is None or test(cur): yield cur
            yield from cur.descendants(test=test)

    def isSameNode(self, n2:'Node') -> bool:
        return self is n2

    def isEqualNode(self, n2:'Node') -> bool:
        """Check the common properties that matter, and the childNodes.
        Subclasses may override to check more, but should call this, too!
        This does *not* check ownerDocument or parentNode, so should work
        across documents (and between a node and its clone).
        """
        if n2 is self: return True
        if not isinstance(n2, Node):
            lg.debug("other is a %s, not a Node.", type(n2).__name__)
            return False
        if self.nodeType != n2.nodeType:
            lg.debug("nodeType differs ('%s' vs. '%s').", self.nodeType, n2.nodeType)
            return False
        if self.nodeName != n2.nodeName:
            lg.debug("nodeName differs ('%s' vs. '%s').", self.nodeName, n2.nodeName)
            return False
        if self.nodeValue != n2.nodeValue:
            lg.debug("nodeValue differs for '%s'.", self.nodeName)
            return False
        if len(self) != len(n2):
            lg.debug("'%s' has %d childNodes vs. %d.", self.nodeName, len(self), len(n2))
            return False
        for ch1, ch2 in zip(self, n2):
            if not ch1.isEqualNode(ch2): return False
        return True

    def cloneNode(self, deep:bool=False) -> 'Node':
        """NOTE: Default value for 'deep' has changed in the DOM standard and browsers!
        """
        raise NSuppE("Shouldn't really be cloning an abstract Node.")

    def _setOwnerDocument(self, otherDocument:'Document') -> None:
        for node in self.descendants(includeSelf=True):
            node.ownerDocument = otherDocument


    #### Mutators
    #
    def insert(self, i:int, newChild:'Node') -> None:
        """Note: Argument order is different than (say) insertBefore.
        NOTE: All insertions end up here.
        """
        if not self.canHaveChildren:
            raise HReqE(f"node type '{type(self).__name__}' cannot have children.")
        if isinstance(newChild, DocumentFragment):
            for offset, cur in enumerate(list(newChild)):
                newChild.removeChild(cur)
                self.insert(i + offset, cur)
            return
        if not isinstance(newChild, Node) or newChild.isDocument:
            raise HReqE(f"newChild is bad type '{type(newChild).__name__}'.")
        if newChild.parentNode is not None: raise HReqE(
            f"newChild already has parent (name '{newChild.parentNode.nodeName}')")
        anc = self
        while anc is not None:
            if anc is newChild: raise HReqE(
                f"Can't insert '{newChild.nodeName}' under itself.")
            anc = anc.parentNode

        if i < 0: i = max(len(self) + i, 0)
        if i > len(self): i = len(self)
        super().insert(i, newChild)
        newChild.parentNode = self

        doc = self if self.isDocument else self.ownerDocument
        if newChild.ownerDocument is not doc: newChild._setOwnerDocument(doc)

    def appendChild(self, newChild:'Node') -> 'Node':
        self.insert(len(self), newChild)
        return newChild

    def append(self, newChild:'Node') -> None:
        self.insert(len(self), newChild)

    def extend(self, newChildren:Iterable['Node']) -> None:
        for ch in list(newChildren): self.insert(len(self), ch)

    def removeChild(self, oldChild:'Node') -> 'Node':
        """Disconnect oldChild from this node, removing it from the tree,
        but not from the document. All removals end up here.
        """
        if getattr(oldChild, "parentNode", None) is not self: raise NotFoundError(
            f"Node to remove (a '{getattr(oldChild, 'nodeName', oldChild)}') is not a child.")
        list.__delitem__(self, self.index(oldChild))
        oldChild.parentNode = None
        return oldChild

    def removeNode(self) -> 'Node':
        """Remove this node from its parent (if any), and return it.
        """
        if self.parentNode is not None:
            self.parentNode.removeChild(self)
        return self

    def __setitem__(self, i:int, newChild:'Node') -> None:
        if not isinstance(i, int): raise TypeError(
            f"Unsupported type '{type(i).__name__}' for [] arg.")
        if getattr(newChild, "parentNode", None) is not None: raise HReqE(
            "New child for [] assignment already has a parent.")
        oldChild = self[i]
        pos = self.index(oldChild)
        self.removeChild(oldChild)
        self.insert(pos, newChild)

    def __delitem__(self, i:int) -> None:
        if not isinstance(i, int): raise TypeError(
            f"Unsupported type '{type(i).__name__}' for del [] arg.")
        self.removeChild(self[i])

    def pop(self, i:int=-1) -> 'Node':
        return self.removeChild(self[i])

    def clear(self) -> None:
        while len(self) > 0:
            self.removeChild(self[0])

    def remove(self, oldChild:'Node') -> None:
        self.removeChild(oldChild)

    def __iadd__(self, newChildren:Iterable['Node']) -> 'Node':
        self.extend(newChildren)
        return self

    def __imul__(self, n:int) -> 'Node':
        raise NSuppE("A node can't have the same child more than once.")

    def sort(self, key:Callable=None, reverse:bool=False) -> None:
        raise NSuppE("Can't reorder childNodes in place; remove and re-insert them.")

    def reverse(self) -> None:
        raise NSuppE("Can't reorder childNodes in place; remove and re-insert them.")


###############################################################################
#
class Document(Node):
    """The root container. Can be built around an initial list of nodes,
    which it adopts as given (sets their parentNode and ownerDocument).
    Unlike insert(), a DocumentFragment passed here stays a child itself,
    and keeps its own children.
    """
    def __init__(self, childNodes:Iterable[Node]=None):
        super().__init__(ownerDocument=None, nodeName=RWord.NN_DOCUMENT)
        self.nodeType = Node.DOCUMENT_NODE
        if childNodes:
            for ch in childNodes: self._adoptAsIs(ch)

    def _adoptAsIs(self, newChild:Node) -> None:
        if not isinstance(newChild, Node) or newChild.isDocument:
            raise HReqE(f"newChild is bad type '{type(newChild).__name__}'.")
        if newChild.parentNode is not None: raise HReqE(
            f"newChild already has parent (name '{newChild.parentNode.nodeName}')")
        list.append(self, newChild)
        newChild.parentNode = self
        if newChild.ownerDocument is not self: newChild._setOwnerDocument(self)

    @property
    def documentElement(self) -> 'Element':
        for ch in self:
            if ch.isElement: return ch
        return None

    def cloneNode(self, deep:bool=False) -> 'Document':
        newDoc = Document()
        if self.userData: newDoc.userData = self.userData
        if deep:
            for ch in self: newDoc.appendChild(ch.cloneNode(deep=True))
        return newDoc

    def createElement(self, tagName:str, attributes:Dict=None) -> 'Element':
        el = Element(ownerDocument=self, nodeName=tagName)
        if attributes:
            for k, v in attributes.items(): el.setAttribute(k, v)
        return el

    def createTextNode(self, data:str) -> 'Text':
        return Text(ownerDocument=self, data=data)

    def createCDATASection(self, data:str) -> 'CDATASection':
        return CDATASection(ownerDocument=self, data=data)

    def createComment(self, data:str) -> 'Comment':
        return Comment(ownerDocument=self, data=data)

    def createProcessingInstruction(self, target:str, data:str) -> 'ProcessingInstruction':
        return ProcessingInstruction(ownerDocument=self, target=target, data=data)

    def createDocumentFragment(self) -> 'DocumentFragment':
        return DocumentFragment(ownerDocument=self)


###############################################################################
#
class DocumentFragment(Node):
    """Inserting one of these inserts its children instead.
    """
    def __init__(self, ownerDocument:Document=None):
        super().__init__(ownerDocument=ownerDocument, nodeName=RWord.NN_FRAGMENT)
        self.nodeType = Node.DOCUMENT_FRAGMENT_NODE

    def cloneNode(self, deep:bool=False) -> 'DocumentFragment':
        newNode = DocumentFragment(ownerDocument=self.ownerDocument)
        if self.userData: newNode.userData = self.userData
        if deep:
            for ch in self: newNode.appendChild(ch.cloneNode(deep=True))
        return newNode


###############################################################################
# Element
#
class Element(Node):
    def __init__(self, ownerDocument:Document=None, nodeName:str=None):
        if not nodeName or badNameChars_re.search(nodeName):
            raise ICharE(f"nodeName '{nodeName}' isn't.")
        super().__init__(ownerDocument=ownerDocument, nodeName=nodeName)
        self.nodeType = Node.ELEMENT_NODE
        self.attributes:Dict[str, str] = {}

    @property
    def tagName(self) -> str:
        return self.nodeName

    def hasAttributes(self) -> bool:
        return len(self.attributes) > 0

    def hasAttribute(self, attrName:str) -> bool:
        return attrName in self.attributes

    def getAttribute(self, attrName:str, default:Any=None) -> str:
        return self.attributes.get(attrName, default)

    def setAttribute(self, attrName:str, attrValue:Any) -> None:
        if not attrName or badNameChars_re.search(attrName):
            raise ICharE(f"Attribute name '{attrName}' isn't.")
        self.attributes[attrName] = str(attrValue)

    def removeAttribute(self, attrName:str) -> None:
        if attrName in self.attributes: del self.attributes[attrName]

    def isEqualNode(self, n2:Node) -> bool:
        if not super().isEqualNode(n2): return False
        if self.attributes != n2.attributes:
            lg.debug("attributes differ for '%s'.", self.nodeName)
            return False
        return True

    def cloneNode(self, deep:bool=False) -> 'Element':
        """Copy the name, attributes, and userData, plus (if 'deep') the
        whole subtree. Don't copy the tree relationships.
        """
        newNode = Element(ownerDocument=self.ownerDocument, nodeName=self.nodeName)
        newNode.attributes = self.attributes.copy()
        if self.userData: newNode.userData = self.userData
        if deep:
            for ch in self: newNode.appendChild(ch.cloneNode(deep=True))
        return newNode


###############################################################################
#
class CharacterData(Node):
    """A cover class for Node sub-types that can only occur as leaf nodes:
        Text, CDATASection, PI, Comment
    """
    def __init__(self, ownerDocument:Document=None, nodeName:str=None, data:str=""):
        super().__init__(ownerDocument=ownerDocument, nodeName=nodeName)
        self.data = data

    @property
    def nodeValue(self) -> str:
        return self.data

    @nodeValue.setter
    def nodeValue(self, newData:str="") -> None:
        self.data = newData

    def _cloneAs(self, newNode:'CharacterData') -> 'CharacterData':
        if self.userData: newNode.userData = self.userData
        return newNode


class Text(CharacterData):
    def __init__(self, ownerDocument:Document=None, data:str=""):
        super().__init__(ownerDocument, nodeName=RWord.NN_TEXT, data=data)
        self.nodeType = Node.TEXT_NODE

    def cloneNode(self, deep:bool=False) -> 'Text':
        return self._cloneAs(Text(ownerDocument=self.ownerDocument, data=self.data))


class CDATASection(CharacterData):
    def __init__(self, ownerDocument:Document=None, data:str=""):
        super().__init__(ownerDocument, nodeName=RWord.NN_CDATA, data=data)
        self.nodeType = Node.CDATA_SECTION_NODE

    def cloneNode(self, deep:bool=False) -> 'CDATASection':
        return self._cloneAs(
            CDATASection(ownerDocument=self.ownerDocument, data=self.data))


class Comment(CharacterData):
    def __init__(self, ownerDocument:Document=None, data:str=""):
        super().__init__(ownerDocument, nodeName=RWord.NN_COMMENT, data=data)
        self.nodeType = Node.COMMENT_NODE

    def cloneNode(self, deep:bool=False) -> 'Comment':
        return self._cloneAs(Comment(ownerDocument=self.ownerDocument, data=self.data))


class ProcessingInstruction(CharacterData):
    def __init__(self, ownerDocument:Document=None, target:str=None, data:str=""):
        if not target or badNameChars_re.search(target):
            raise ICharE(f"PI target '{target}' isn't.")
        super().__init__(ownerDocument, nodeName=target, data=data)
        self.nodeType = Node.PROCESSING_INSTRUCTION_NODE

    @property
    def target(self) -> str:
        return self.nodeName

    def cloneNode(self, deep:bool=False) -> 'ProcessingInstruction':
        return self._cloneAs(ProcessingInstruction(
            ownerDocument=self.ownerDocument, target=self.nodeName, data=self.data))

PI = ProcessingInstruction

AnyNode = Union[Element, Text, CDATASection, Comment, ProcessingInstruction,
    Document, DocumentFragment]
