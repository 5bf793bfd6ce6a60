"""Default configuration values and file content."""

from podfeed.config.schema import PodfeedConfig

DEFAULT_CONFIG = PodfeedConfig()


def get_default_config_content() -> str:
    """Return the commented YAML written by ``podfeed init``."""
    return """\
# podfeed configuration
version: "1"
log_level: INFO

source:
  # Content API page URL, including apikey/apitoken query parameters
  url: null
  timeout_seconds: 30

output:
  path: podcast-feed.xml
  # Escape <guid> values like other fields (changes output of older feeds)
  escape_guid: false

channel:
  title: ""
  description: ""
  link: ""
  language: en-us
  copyright: ""
  managing_editor: ""
  web_master: ""
  category: ""
  itunes_author: ""
  itunes_owner_name: ""
  itunes_owner_email: ""
  itunes_image: ""
  itunes_explicit: "no"
"""
