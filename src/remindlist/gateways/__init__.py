"""TaskGateway implementations: local SQLite store and HTTP REST client."""
