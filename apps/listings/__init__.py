"""Listings app package.

A listing is a place a user offers for nightly rent. Listings stay hidden
from the public index until an administrator verifies them.
"""
