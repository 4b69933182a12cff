"""
goldenview CLI

Commands:
- goldenview script - Show how an event script parses
- goldenview snapshots list/reset - Golden file housekeeping
- goldenview sanitize - Show the file name a snapshot name maps to
"""
