"""Feature modules for neo-access.

Feature-First architecture:
- permissions/: access-control decisions over hierarchical resource names
- filters/: role-gated row-level filters for queries and collections
- events/: in-process change feeds that signal permission changes
"""
