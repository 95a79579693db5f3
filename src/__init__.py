"""docktool — generate Dockerfile and docker-compose.yml from a project tree."""

__version__ = "0.1.0"
