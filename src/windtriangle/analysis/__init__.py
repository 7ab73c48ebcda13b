"""Wind triangle vector arithmetic."""
