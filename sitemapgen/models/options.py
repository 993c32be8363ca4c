from typing import Literal

from pydantic import BaseModel, Field

from sitemapgen.models.sitemap_format import SitemapFormat


class GenerateOptions(BaseModel):
    """Options for one command-line sitemap generation run."""

    input_path: str = Field(description="JSON file holding an array of page objects, or '-' for stdin.")
    format: SitemapFormat = SitemapFormat.XML
    output_path: str = Field(min_length=1, description="Destination file for the generated sitemap.")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
