"""Utility helpers for EC2 SSH Sync."""
