"""Core app package.

Cross-entity consistency for the marketplace: the cascade manager that
removes dependents of deleted users and listings, the domain events it
emits, audit log handlers, health checks and maintenance commands.
"""
