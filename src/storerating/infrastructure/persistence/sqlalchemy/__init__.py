"""SQLAlchemy persistence for stores and ratings."""
