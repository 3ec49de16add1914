"""
SEO blog topic suggestions per (owner email, brand).
"""
