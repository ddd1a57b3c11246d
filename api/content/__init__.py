"""
Editable page content, addressed by slug.
"""
