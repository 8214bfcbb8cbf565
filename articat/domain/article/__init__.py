"""Article domain: live articles, their history and restore."""
