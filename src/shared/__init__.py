"""
Shared Utilities

Domain error hierarchy and small helpers used by both the player and team
packages.
"""
