"""Backend services: database access, money, accounting."""
