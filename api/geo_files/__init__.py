"""
GEO file lookup, history and workflow trigger.
"""
