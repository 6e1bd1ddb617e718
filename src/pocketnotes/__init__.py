"""
Pocket Notes Backend - groups and notes for small teams

Users own color-tagged groups, invite members into them and post short
timestamped notes that only their author can edit or remove.

Version: 1.0.0
"""

__version__ = "1.0.0"
