"""Chains client: REST endpoints over ChainService."""
