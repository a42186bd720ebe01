"""External adapters for the Gatekeeper system.

This package provides implementations of the core port interfaces and
the outer surfaces that drive the core.

Adapter Organization:

- fees/: FeePolicyPort implementations
- digest/: DigestPort implementations
- store/: SecretStorePort implementations
- credentials.py: Factory-based validator wired from settings
- cli/: Command-line interface
"""
