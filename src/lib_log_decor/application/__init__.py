"""Application layer: ports and use cases of the line decorator."""
