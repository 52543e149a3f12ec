"""SQLAlchemy persistence infrastructure shared by all blogger packages."""
