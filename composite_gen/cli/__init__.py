"""Command line interface: composite-gen generate | validate | inspect."""
