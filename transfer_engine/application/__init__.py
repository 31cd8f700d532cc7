"""Application layer: ports, DTOs and use cases orchestrating the domain."""
