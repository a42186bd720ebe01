"""Test suite for the Gatekeeper system.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations and the CLI handler

3. fakes/: Port implementations for testing
   - In-memory implementations of FeePolicyPort, SecretStorePort, DigestPort
   - Used by core unit tests
"""
