"""
Admin Module

Administrative endpoints for the college bus booking system:

- Credential check against configured admin account
- Bus route management
- Booking overview and status changes
- System online/offline switch
- Dashboard statistics

Admin endpoints are not subject to the system status gate.
"""
