"""Application services: business rules on top of the unit of work."""
