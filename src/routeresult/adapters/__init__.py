"""Adapters that hand translated responses to web frameworks."""
