"""HTTP service exposing the URL cleaner."""
