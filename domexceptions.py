#!/usr/bin/env python3
#
# https://developer.mozilla.org/en-US/docs/Web/API/DOMException
# https://webidl.spec.whatwg.org/#dfn-error-names-table
#
class DOMException(Exception):                  pass
DE = DOMException

# Use TypeError for invalid arguments, as WHATWG says.
#
class HierarchyRequestError(DE): pass # would yield an incorrect node tree. (3)
class InvalidCharacterError(DE): pass # string contains invalid characters. (5)
class NotFoundError(DE): pass         # object can not be found here. (8)
class NotSupportedError(DE): pass     # operation not supported. (9)

### Abbreviations
#
HReqE = HierarchyRequestError
ICharE = InvalidCharacterError
NSuppE = NotSupportedError
