"""gapihub command line interface."""
