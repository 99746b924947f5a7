"""Runtime configuration for the Voice API client."""
