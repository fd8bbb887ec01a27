"""vmprov - first-boot provisioning for virtual machines."""

__version__ = "0.1.0"
