"""confcache command line interface."""
