"""
Students Module

Passwordless student authentication by college ID and booking history.
"""
