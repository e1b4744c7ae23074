"""Inbound webhook schemas."""
