"""Users app package.

Defines the marketplace account model with a role (user or admin) and a
blocked/active status, plus registration, login and the admin dashboard
API. Use ``apps.users.models.CustomUser`` as the AUTH_USER_MODEL
throughout the project.
"""
