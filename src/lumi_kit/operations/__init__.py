"""Install operations built on the parsing and rendering core."""
