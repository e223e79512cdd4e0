"""
Unleash Provider - Declarative management of Unleash server resources.

This provider maps infrastructure-as-code lifecycle calls onto the Unleash
Admin REST API:
- Users, projects, custom roles and API tokens
- Project access (role membership of users and groups)
- Read-only lookups for users, projects, permissions and roles
"""

__version__ = "0.1.0"
