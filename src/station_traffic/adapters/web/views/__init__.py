"""LiveViews for the web adapter."""
