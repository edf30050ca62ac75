"""Feature modules for ownership-guard."""
