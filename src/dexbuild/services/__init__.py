"""
Shared service utilities.

- http.py - ``requests`` session used for every upstream call
"""
