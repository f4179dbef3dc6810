"""
Static site metadata for the MusicBingo front end.

`WEBSITE` is created once at import time and is frozen: presentation layers
read it, nothing writes it.
"""

from pydantic import BaseModel, ConfigDict, Field

_HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class SiteMetadata(BaseModel):
    """Descriptive metadata about the application (name, author, URLs, colours)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    author: str
    og_language: str = Field(alias="ogLanguage")
    site_language: str = Field(alias="siteLanguage")
    site_title: str = Field(alias="siteTitle")
    site_short_title: str = Field(alias="siteShortTitle")
    description: str
    site_url: str = Field(alias="siteUrl")
    background_color: str = Field(alias="backgroundColor", pattern=_HEX_COLOR)
    theme_color: str = Field(alias="themeColor", pattern=_HEX_COLOR)
    contact_email: str = Field(alias="contactEmail")
    github_page: str = Field(alias="githubPage")

    def as_dict(self) -> dict[str, str]:
        """Return the camelCase mapping used by web templates."""
        return self.model_dump(by_alias=True)


WEBSITE = SiteMetadata(
    author="GardenSnakes",
    og_language="en_US",
    site_language="en-US",
    site_title="MusicBingo",
    site_short_title="MusicBingo",
    description=(
        "Scan QR codes, listen to songs, and guess the track using hints like "
        "artist, year, and title. Play with friends and test your music knowledge!"
    ),
    site_url="https://musicbingo.mrproper.dev",
    background_color="#1b4079",
    theme_color="#d62828",
    contact_email="contact@mrproper.dev",
    github_page="https://github.com/GewoonJaap",
)
