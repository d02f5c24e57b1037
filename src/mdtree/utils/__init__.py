"""Shared utilities for mdtree."""
