"""Core provisioning logic for vmprov."""
