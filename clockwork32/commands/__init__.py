"""Click subcommands registered on the ``clockwork32`` group."""
