"""Live room understanding: one observation at a time, with running statistics."""
