"""
Report foundation: section registry and exceptions.
"""
