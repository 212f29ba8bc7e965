"""Weather lookup with a bounded per-session search history."""
