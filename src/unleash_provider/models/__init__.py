"""
Models package - Pydantic models for type-safe resource handling.

Defines data models for:
- Provider configuration
- Resource and data source state (snake_case, as declared by operators)
- Unleash Admin API request and response bodies (camelCase on the wire)
"""
