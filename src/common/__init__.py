"""Shared utilities for term-mouse."""
