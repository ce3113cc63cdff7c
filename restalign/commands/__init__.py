"""Command implementations behind the click entrypoint."""
