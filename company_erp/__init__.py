"""Company ERP API: employee auth, leave workflow and subscription billing."""

__version__ = "1.0.0"
