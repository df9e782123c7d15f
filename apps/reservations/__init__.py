"""Reservations app package.

Holds the reservation model, the pricing engine that computes the
authoritative total of a stay, and the services that create and edit
reservations. A reservation's price is never taken from the client.
"""
