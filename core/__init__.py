"""Order store - persistence of the Order aggregate over SQLAlchemy."""
