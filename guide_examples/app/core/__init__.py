"""Application core: configuration, logging, the service registry and route ordering."""
