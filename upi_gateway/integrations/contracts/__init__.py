"""
Contracts (data models).

This folder defines the request shapes sent to the payment gateway:
- Contact and fund account creation bodies
- Payout bodies
- Collection (order / payment link) bodies

Both the services and the HTTP client rely on these instead of ad-hoc dicts.
"""
