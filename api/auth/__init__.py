"""
Session gate: token decoding and FastAPI dependencies.
"""
