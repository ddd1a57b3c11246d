"""
Teaching catalog: courses, laboratories and downloadable resources.
"""
