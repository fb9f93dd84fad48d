"""Blueprints for the template server."""
