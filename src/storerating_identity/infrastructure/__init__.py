"""Identity infrastructure: SQLAlchemy persistence."""
