"""Gatekeeper: admission fees and credential checks behind injected ports."""
