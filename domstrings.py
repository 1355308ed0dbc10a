#!/usr/bin/env python3
#
# domstrings: Case conversion and markup sniffing for DOM callers.
#
import re
from typing import Final

__metadata__ = {
    "title"        : "domstrings",
    "description"  : "Casing converters and a markup sniffer for DOM utilities.",
    "rightsHolder" : "Steven J. DeRose",
    "creator"      : "http://viaf.org/viaf/50334488",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2010-01-10; separate module since 2024-08",
    "modified"     : "2025-04-01",
    "publisher"    : "http://github.com/sderose",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']


descr = """
=Description=

A few string helpers that attribute, style, and loading code need.
All the methods are static, so you don't have to instantiate the DomStrings
class. The same names are available as module-level functions.

==Methods==

* '''camelCase'''(s)

Each "_", ".", or "-" followed by an (ASCII) word character is replaced by
that character in upper case. A separator at the very end is just dropped.
A separator followed by anything else is kept, so "foo--bar" becomes
"foo-Bar". This is not the inverse of cssCase().

* '''cssCase'''(s)

Put "-" before every ASCII upper-case letter, then lower-case everything.
So "fooBar" becomes "foo-bar", and "FooBar" becomes "-foo-bar" (yes,
with the leading hyphen).

* '''isHtml'''(s)

A cheap test of whether a string looks like markup (as opposed to a selector
or plain text). It only looks at the *first* "<": that must be followed by
an ASCII letter or "!" (for comments and doctype declarations), and a ">"
must come somewhere at least two characters after it. It is not a parser,
and it can be fooled both ways:
    isHtml("<div>")            -> True
    isHtml("<!doctype html>")  -> True
    isHtml("< div>")           -> False
    isHtml("<a")               -> False
    isHtml("1 < 2 <b>")        -> False  (first "<" is followed by space)
    isHtml("see <b and c>")    -> True
"""


###############################################################################
#
class DomStrings:
    """Static methods for converting identifier case and sniffing markup.
    """
    # re.ASCII keeps \w to [A-Za-z0-9_]; \Z is the true end of string
    # (unlike $, which also matches before a final newline).
    camelSep_cre:Final = re.compile(r"[_.-](\w|\Z)", flags=re.ASCII)
    upperAscii_cre:Final = re.compile(r"[A-Z]")

    tagOpen:Final = "<"
    tagClose:Final = ">"
    declOpen:Final = "!"

    @staticmethod
    def camelCase(s:str) -> str:
        return DomStrings.camelSep_cre.sub(DomStrings._upperGroup, s)

    @staticmethod
    def _upperGroup(mat:re.Match) -> str:
        return mat.group(1).upper()

    @staticmethod
    def cssCase(s:str) -> str:
        """Convert camel case to "CSS case", where word boundaries are
        hyphens and all characters are lower-case.
        """
        return DomStrings.upperAscii_cre.sub(r"-\g<0>", s).lower()

    @staticmethod
    def isAsciiLetter(c:str) -> bool:
        return ("a" <= c <= "z") or ("A" <= c <= "Z")

    @staticmethod
    def isHtml(s:str) -> bool:
        tagStart = s.find(DomStrings.tagOpen)

        # Need room for at least a one-char name and the ">".
        if tagStart < 0 or tagStart > len(s) - 3: return False

        tagChar = s[tagStart + 1]
        if not (DomStrings.isAsciiLetter(tagChar) or tagChar == DomStrings.declOpen):
            return False
        return s.find(DomStrings.tagClose, tagStart + 2) >= 0


camelCase = DomStrings.camelCase
cssCase = DomStrings.cssCase
isHtml = DomStrings.isHtml
