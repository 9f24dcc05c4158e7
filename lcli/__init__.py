"""Client library for the LinkedIn REST API: models, services, configuration and output."""

__version__ = "0.1.0"