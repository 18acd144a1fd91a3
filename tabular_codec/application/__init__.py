"""Application layer: use cases, DTOs and the ports they depend on."""
