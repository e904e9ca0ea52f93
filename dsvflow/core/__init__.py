"""Core domain: entities, ports and pure business services."""
