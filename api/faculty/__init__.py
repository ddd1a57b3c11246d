"""
Faculty directory.
"""
