"""Configuration for TaskBoard."""

from pydantic import Field
from pydantic_settings import BaseSettings

# Workflow stages in display order. The first stage is the default for new tasks.
STATUSES: tuple[str, ...] = (
    "Idea",
    "Assigned",
    "Drafting",
    "Editing",
    "Fact-Check",
    "Scheduled",
    "Published",
)
DEFAULT_STATUS = STATUSES[0]

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000

HOST = "0.0.0.0"


class Config(BaseSettings):
    """Application configuration.

    Only ``PORT`` is read from the environment.
    """

    port: int = Field(default=4000)
