"""
Booking Module

Seat booking for college bus routes. It includes:

- Booking creation with seat availability and duplicate checks
- Seat inventory decrement serialized per route
- Booking status transitions (pending, confirmed, cancelled)
- Booking views enriched with student and route details

Key Components:
- booking_service.py: Booking rules and status transitions
- router.py: FastAPI endpoints for students
- schemas.py: Pydantic models for bookings
"""
