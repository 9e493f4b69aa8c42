"""Services Layer — lookup, referential checks and persistence behind the routes."""
