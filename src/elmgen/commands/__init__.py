"""Built-in CLI commands registered on the root application in :mod:`elmgen.app`."""
