"""Application layer: pipeline stages and the ports they depend on."""
