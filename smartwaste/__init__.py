"""SmartWaste: perishable stock tracking and waste logging for small kitchens."""

__version__ = "0.1.0"
