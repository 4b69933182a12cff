"""
Event scripts: comma separated key tokens, one event group per line.
"""

from .parser import EventGroup, Script, load_script, parse_script_text, script_path

__all__ = [
    "EventGroup",
    "Script",
    "load_script",
    "parse_script_text",
    "script_path",
]
