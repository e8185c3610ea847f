"""Country report generation: loading, section registry, rendering."""
