"""
Persona and search-prompt generation for the brand monitor.
"""
