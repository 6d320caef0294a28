"""Entry point for ``python -m confcache``."""

from confcache.cli.main import main

if __name__ == "__main__":
    main()
