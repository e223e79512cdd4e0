"""
Tests package - Test suite for the Unleash provider.

Contains:
- unit/: Unit tests for individual components, with the Unleash server
  stubbed through mocks or an httpx mock transport
"""
