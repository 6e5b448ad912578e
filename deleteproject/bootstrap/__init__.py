"""Process-level wiring resolved once at startup."""
