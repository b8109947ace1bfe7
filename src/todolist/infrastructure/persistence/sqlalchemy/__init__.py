"""SQLAlchemy persistence for users, lists and todos."""
