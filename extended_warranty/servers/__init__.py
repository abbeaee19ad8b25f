"""Servers Package - MCP tool servers for the extended warranty engine."""
