"""
News articles: paginated listing, CRUD and view counting.
"""
