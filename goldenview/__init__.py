"""
Golden-file snapshot testing for stateful view components

Replay scripted input events against a component, settle its effect chains,
and compare every rendered view with a recorded baseline file.
"""

__version__ = "0.1.0"
