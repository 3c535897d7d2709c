"""Board network domain: models, layout configuration and pure analysis services."""
