"""
Blog writer endpoints: list, view and update.
"""
