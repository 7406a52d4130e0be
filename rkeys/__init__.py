"""rkeys - bulk key inspection and maintenance for Redis / Valkey."""
