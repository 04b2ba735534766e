"""Delivery surfaces for the skill (HTTP API and function-as-a-service)."""
