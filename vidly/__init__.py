"""Vidly movie rental service."""
