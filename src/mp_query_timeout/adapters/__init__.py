"""Adapters – concrete data-access hosts for the query-timeout hooks."""
