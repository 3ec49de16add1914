"""
Redirects for legacy page URLs.
"""
