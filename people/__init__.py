"""People service: user, email and friendship records enriched at creation time."""
