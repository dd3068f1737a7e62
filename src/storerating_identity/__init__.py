"""User identity and authentication for the store rating service.

Users, roles, credentials, token issuing and the role-gated access control
used by every protected endpoint.
"""
