"""Command line interface for the remote WebDriver client."""
