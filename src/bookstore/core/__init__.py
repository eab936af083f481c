"""Business services, domain models and security helpers."""
