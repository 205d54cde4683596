"""Third-party service integrations."""
