"""Signalist watchlist API application."""
