"""Application layer: ports, request/response models and the export use case."""
