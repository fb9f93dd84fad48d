"""
flightbook: flight seat booking demo

Two small programs sharing one package:
1. Booking store: a SQLite-backed store of flights and booked seats
2. Template server: a Flask app rendering template.html on every request

The booking store keeps one row per booked seat and enforces the
500-seat capacity of a flight inside a single write transaction.
"""

__version__ = "0.1.0"
