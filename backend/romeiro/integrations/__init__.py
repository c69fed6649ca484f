"""Third-party integration clients."""
