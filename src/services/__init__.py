"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities and ports.

This layer contains:
- ApplicationService: registration and expiry of applications
- create_application_service: the single assembly point for the service

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
