"""Infrastructure layer: catalog HTTP client, AI agent, SQLite persistence and the web API."""
