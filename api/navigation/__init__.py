"""
Site navigation tree.
"""
