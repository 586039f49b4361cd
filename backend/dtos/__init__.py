"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple services and the API layer from the
database models. DTOs prevent leaking database structure (passwords, link
tables) to callers and allow independent evolution.

Structure:
- request/: DTOs for incoming data, including partial updates
- response/: DTOs for outgoing data and the ResponseModel envelope
"""
