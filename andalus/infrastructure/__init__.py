"""Infrastructure: configuration, logging and the CMS client."""
