"""Version 1 of the Account Service API."""
