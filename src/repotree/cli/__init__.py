"""Interactive command-line front end for repotree."""
