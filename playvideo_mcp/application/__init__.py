"""Application layer - tool dispatch and presentation.

This layer contains:
- Services: catalog, validation, dispatcher, renderers, resource registry
- DTOs: remote call descriptors and rendered responses
"""
