"""
Data package for the Metro Planner application.

This package contains the JSON line files describing the metro network.
"""
