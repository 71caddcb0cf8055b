"""Application layer - use cases orchestrating the organization domain.

This layer contains:
- ports: Protocols for the store collaborators and the service interface
- dtos: Projections and paging types crossing the service boundary
- services: OrganizationService and IterationRecorderService

Import rules:
- CAN import: domain, config
- CANNOT import: infrastructure, bootstrap
"""
