"""Cross-context building blocks: access control, typed errors, pagination and HTTP plumbing."""
