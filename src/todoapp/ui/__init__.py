"""View tree, controls and the Rich painter."""
