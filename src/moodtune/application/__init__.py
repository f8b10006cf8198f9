"""
Application Layer

Orchestrates domain objects and infrastructure to fulfill use cases.

Structure:
- interfaces/: Port interfaces for infrastructure adapters
- services/: Application services (recommendation selection, journal flow)
"""
