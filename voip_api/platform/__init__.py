"""Platform infrastructure module.

This module provides the infrastructure shared by the API clients:
- Request clients over the account executor
- Settings loaded from the environment
- Structured logging
"""
