"""schemagraph: schema graph engine for relational foreign-key metadata."""

__version__ = "0.1.0"
