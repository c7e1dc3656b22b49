"""Configuration management for the tmux-cluster application."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """Application configuration with sensible defaults."""

    # Cluster definitions
    CONFIG_DIR: Path = Path(os.path.expanduser(
        os.getenv("TMUX_CLUSTER_CONFIG_DIR", "~/.clusterssh")
    ))
    CLUSTERS_FILE: str = os.getenv("TMUX_CLUSTER_CLUSTERS_FILE", "clusters")
    TAGS_FILE: str = os.getenv("TMUX_CLUSTER_TAGS_FILE", "tags")

    # External programs
    TMUX_BINARY: str = os.getenv("TMUX_CLUSTER_TMUX", "tmux")
    SSH_COMMAND: str = os.getenv("TMUX_CLUSTER_SSH", "ssh")

    # Sessions
    SESSION_PREFIX: str = os.getenv("TMUX_CLUSTER_SESSION_PREFIX", "cluster-")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        required = {
            "TMUX_CLUSTER_TMUX": cls.TMUX_BINARY,
            "TMUX_CLUSTER_SSH": cls.SSH_COMMAND,
        }
        missing = [k for k, v in required.items() if not v.strip()]
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")

# Don't validate on import to allow for dynamic configuration
# Call Config.validate() explicitly when needed
