#!/usr/bin/env python3
#
import unittest
import logging

from basedom import Document, Element
from domoptions import DomUtilOptions
from domutils import isNodeSelection
from nodeselection import NodeSelection

from makeTestDoc import makeTestDoc2, snapshotLinks

lg = logging.getLogger("testNodeSelection")
logging.basicConfig(level=logging.INFO)


###############################################################################
#
class TestNodeSelection(unittest.TestCase):
    def setUp(self):
        self.n = makeTestDoc2(nchildren=4)
        self.sel = NodeSelection(self.n.paras)

    def test_basics(self):
        sel = self.sel
        self.assertTrue(isNodeSelection(sel))
        self.assertEqual(sel.length, 4)
        self.assertEqual(sel.get(), self.n.paras)
        self.assertIsNot(sel.get(), sel)
        self.assertIs(sel.get(0), self.n.paras[0])
        self.assertIs(sel.get(-1), self.n.paras[-1])
        self.assertIsNone(sel.get(4))
        self.assertIsNone(sel.get(-5))
        self.assertEqual(NodeSelection().length, 0)

    def test_not_owner(self):
        for p in self.sel:
            self.assertIs(p.parentNode, self.n.body)
        one = NodeSelection(self.n.h1)
        self.assertEqual(one.length, 1)
        self.assertIs(one[0], self.n.h1)
        self.assertIs(self.n.h1.parentNode, self.n.body)

    def test_each(self):
        seen = []
        ret = self.sel.each(lambda p, i: seen.append((p.getAttribute("id"), i)))
        self.assertIs(ret, self.sel)
        self.assertEqual(seen, [ (f"zork{k}", k) for k in range(4) ])

    def test_each_live(self):
        sel = NodeSelection(self.n.paras,
            options=DomUtilOptions({ "snapshotEach": "no" }))
        seen = []
        def swap(p, i):
            seen.append(p)
            if i == 0: sel[1] = self.n.h1
        sel.each(swap)
        self.assertIs(seen[1], self.n.h1)

    def test_clone(self):
        lg.info("Starting test_clone")
        before = snapshotLinks(self.n.doc)
        dup = self.sel.clone()
        self.assertIsInstance(dup, NodeSelection)
        self.assertTrue(isNodeSelection(dup))
        self.assertEqual(dup.length, self.sel.length)
        root = dup[0].parentNode
        self.assertIsInstance(root, Document)
        for src, c in zip(self.sel, dup):
            self.assertIsNot(c, src)
            self.assertTrue(c.isEqualNode(src))
            self.assertIs(c.parentNode, root)
        self.assertEqual(snapshotLinks(self.n.doc), before)

        dup[0].appendChild(Element(nodeName="span"))
        self.assertFalse(dup[0].isEqualNode(self.sel[0]))


if __name__ == '__main__':
    unittest.main()
