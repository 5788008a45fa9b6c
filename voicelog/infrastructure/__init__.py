"""Host-side configuration and logging setup."""
