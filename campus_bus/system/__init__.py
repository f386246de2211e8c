"""
System Status Module

Global online/offline switch consulted before new bookings are accepted.
"""
