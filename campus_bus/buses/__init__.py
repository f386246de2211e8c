"""
Bus Routes Module

Bus route catalogue with seat capacity, managed by administrators and
listed to students.
"""
