"""Adapters – concrete Store and Codec implementations."""
