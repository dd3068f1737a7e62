"""Store Rating - role-based store rating service.

Core package: stores, ratings, the rating aggregator and the directory
queries, plus the FastAPI presentation layer. Identity concerns (users,
roles, tokens, passwords) live in storerating_identity.
"""
