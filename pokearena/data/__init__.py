"""Static data tables: species and move catalogs."""
