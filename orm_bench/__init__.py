"""Compare raw SQL and ORM data-access strategies on one CRUD workload."""

__version__ = "0.1.0"
