"""access-stats — endpoint, per-minute and status-code counts from an access log."""
