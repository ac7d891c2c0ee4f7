"""Command line interface for the dashboard scraper."""
