"""Configuration management for the seedmerge application."""
import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """Application configuration with sensible defaults."""

    # Input / output files
    SEED_FILE: str = os.getenv("SEEDMERGE_SEED_FILE", "seed.json")
    REGISTRY_FILE: str = os.getenv("SEEDMERGE_REGISTRY_FILE", "mcp-registry.json")

    # Registry record envelope
    META_NAMESPACE: str = os.getenv(
        "SEEDMERGE_META_NAMESPACE",
        "io.modelcontextprotocol.registry/official"
    )

    # Output formatting
    JSON_INDENT: int = int(os.getenv("SEEDMERGE_JSON_INDENT", "2"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        required = {
            "SEED_FILE": cls.SEED_FILE,
            "REGISTRY_FILE": cls.REGISTRY_FILE,
            "META_NAMESPACE": cls.META_NAMESPACE,
        }
        missing = [k for k, v in required.items() if not v]
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")
        if cls.JSON_INDENT < 0:
            raise ValueError(f"JSON_INDENT must be non-negative, got {cls.JSON_INDENT}")
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"Unknown LOG_LEVEL: {cls.LOG_LEVEL}")

# Don't validate on import to allow for dynamic configuration
# Call Config.validate() explicitly when needed
