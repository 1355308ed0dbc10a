#!/usr/bin/env python3
#
# domoptions: Switches for the few places domutils has a choice of behavior.
#
from typing import Any, Dict
from types import SimpleNamespace
import logging

lg = logging.getLogger("domoptions")

DomUtilOptionDefs = {
    # Raise TypeError for isNodeSelection(None), instead of returning False.
    "strictSelectionCheck": (bool, False ),
    # Read all the items before the first domEach() callback; if off, read
    # each item as its turn comes (the count is fixed either way).
    "snapshotEach":         (bool, True  ),
}


###############################################################################
#
class DomUtilOptions(SimpleNamespace):
    """Options for domutils. Construct with a dict of any overrides, or
    change them later with setOption() (which checks name and type).
    """
    def __init__(self, options:Dict=None):
        for k, v in DomUtilOptionDefs.items():
            assert v[1] is None or isinstance(v[1], v[0])
            setattr(self, k, v[1])
        if options:
            for k, v in options.items():
                self.setOption(k, v)

    def __getattr__(self, name:str) -> Any:
        """If an unknown option is accessed, return None. Private and dunder
        names still fail, so copy and pickle find no bogus hooks.
        """
        if name.startswith("_"): raise AttributeError(name)
        return None

    def setOption(self, optName:str, optValue:Any) -> None:
        if optName not in DomUtilOptionDefs:
            raise AttributeError(f"No such option: '{optName}'.")
        optType = DomUtilOptionDefs[optName][0]
        if optType == bool:
            optValue = DomUtilOptions.boolOption(optName, optValue)
        if optValue is not None and not isinstance(optValue, optType):
            raise AttributeError(
                f"Option '{optName}' takes '{optType}', not '{type(optValue)}'.")
        lg.debug("Setting option %s to %s.", optName, optValue)
        setattr(self, optName, optValue)

    @staticmethod
    def boolOption(optName:str, optValue:Any, strict:bool=True) -> bool:
        """Recognize a small range of boolean values. Unknowns mean false,
        unless 'strict' is set.
        """
        if optValue in [ True, "yes", "1", 1 ]: return True
        if optValue in [ False, "no", "0", 0 ]: return False
        if strict: raise ValueError(
            f"Unrecognized boolean value '{optValue}' for option '{optName}'.")
        return False


defaultOptions = DomUtilOptions()
